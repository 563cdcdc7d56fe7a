"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_event_bus, get_register_attendance_handler

The container is organized into modules by concern:
- infrastructure: Database, sessions, logging
- events: Event bus and registry-driven subscriptions
- repositories: Repository factories
- payments: Payment processor registry
- attendance_handlers: Attendance command/query handler factories
- payment_handlers: Payment command/query handler factories
- dashboard_handlers: Admin dashboard handler factory
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

# Event bus
from src.core.container.events import get_event_bus

# Payment processors
from src.core.container.payments import get_payment_processors

# Repositories
from src.core.container.repositories import (
    get_attendance_repository,
    get_event_catalog_repository,
    get_payment_repository,
    get_user_directory_repository,
)

# Payment handlers
from src.core.container.payment_handlers import (
    get_cancel_payment_handler,
    get_check_payment_status_handler,
    get_create_payment_handler,
    get_get_payment_handler,
    get_list_event_payments_handler,
    get_list_user_payments_handler,
    get_payment_stats_handler,
    get_process_payment_handler,
    get_purchase_ticket_handler,
    get_refund_payment_handler,
    get_search_payments_handler,
    get_total_revenue_handler,
)

# Attendance handlers
from src.core.container.attendance_handlers import (
    get_attendance_status_handler,
    get_cancel_attendance_and_refund_handler,
    get_cancel_attendance_handler,
    get_check_in_attendance_handler,
    get_check_out_attendance_handler,
    get_get_attendance_handler,
    get_list_event_attendances_handler,
    get_list_user_attendances_handler,
    get_register_attendance_handler,
    get_search_attendances_handler,
    get_update_attendance_handler,
)

# Dashboard
from src.core.container.dashboard_handlers import get_admin_dashboard_handler

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    # Events
    "get_event_bus",
    # Payment processors
    "get_payment_processors",
    # Repositories
    "get_attendance_repository",
    "get_event_catalog_repository",
    "get_payment_repository",
    "get_user_directory_repository",
    # Attendance handlers
    "get_attendance_status_handler",
    "get_cancel_attendance_and_refund_handler",
    "get_cancel_attendance_handler",
    "get_check_in_attendance_handler",
    "get_check_out_attendance_handler",
    "get_get_attendance_handler",
    "get_list_event_attendances_handler",
    "get_list_user_attendances_handler",
    "get_register_attendance_handler",
    "get_search_attendances_handler",
    "get_update_attendance_handler",
    # Payment handlers
    "get_cancel_payment_handler",
    "get_check_payment_status_handler",
    "get_create_payment_handler",
    "get_get_payment_handler",
    "get_list_event_payments_handler",
    "get_list_user_payments_handler",
    "get_payment_stats_handler",
    "get_process_payment_handler",
    "get_purchase_ticket_handler",
    "get_refund_payment_handler",
    "get_search_payments_handler",
    "get_total_revenue_handler",
    # Dashboard
    "get_admin_dashboard_handler",
]
