"""Admin dashboard handler dependency factory."""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.repositories import (
    get_event_catalog_repository,
    get_payment_repository,
    get_user_directory_repository,
)
from src.domain.enums.currency import Currency

if TYPE_CHECKING:
    from src.application.queries.handlers.get_admin_dashboard_handler import (
        GetAdminDashboardHandler,
    )
    from src.domain.protocols.event_catalog_protocol import (
        EventCatalogProtocol,
        UserDirectoryProtocol,
    )
    from src.domain.protocols.payment_repository import PaymentRepository


async def get_admin_dashboard_handler(
    event_catalog: "EventCatalogProtocol" = Depends(get_event_catalog_repository),
    user_directory: "UserDirectoryProtocol" = Depends(get_user_directory_repository),
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
) -> "GetAdminDashboardHandler":
    """Get GetAdminDashboard query handler (request-scoped).

    Creates handler with:
    - EventCatalogRepository (read-only, request-scoped)
    - UserDirectoryRepository (read-only, request-scoped)
    - PaymentRepository (request-scoped)
    """
    from src.application.queries.handlers.get_admin_dashboard_handler import (
        GetAdminDashboardHandler,
    )

    return GetAdminDashboardHandler(
        event_catalog=event_catalog,
        user_directory=user_directory,
        payment_repo=payment_repo,
        default_currency=Currency.parse(settings.default_currency),
        default_top_organizers_limit=settings.top_organizers_limit,
    )
