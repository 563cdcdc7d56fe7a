"""Attendance handler dependency factories.

Request-scoped handler instances for the attendance lifecycle:
- Commands (register, check in, check out, cancel, update, cancel + refund)
- Queries (get, status, list by event/user, paginated search)
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_logger
from src.core.container.payment_handlers import get_refund_payment_handler
from src.core.container.repositories import (
    get_attendance_repository,
    get_payment_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.cancel_attendance_and_refund_handler import (
        CancelAttendanceAndRefundHandler,
    )
    from src.application.commands.handlers.cancel_attendance_handler import (
        CancelAttendanceHandler,
    )
    from src.application.commands.handlers.check_in_attendance_handler import (
        CheckInAttendanceHandler,
    )
    from src.application.commands.handlers.check_out_attendance_handler import (
        CheckOutAttendanceHandler,
    )
    from src.application.commands.handlers.refund_payment_handler import (
        RefundPaymentHandler,
    )
    from src.application.commands.handlers.register_attendance_handler import (
        RegisterAttendanceHandler,
    )
    from src.application.commands.handlers.update_attendance_handler import (
        UpdateAttendanceHandler,
    )
    from src.application.queries.handlers.get_attendance_handler import (
        GetAttendanceHandler,
        GetAttendanceStatusHandler,
    )
    from src.application.queries.handlers.list_attendances_handler import (
        ListEventAttendancesHandler,
        ListUserAttendancesHandler,
        SearchAttendancesHandler,
    )
    from src.domain.protocols.attendance_repository import AttendanceRepository
    from src.domain.protocols.payment_repository import PaymentRepository


# ============================================================================
# Attendance Command Handler Factories (Request-Scoped)
# ============================================================================


async def get_register_attendance_handler(
    attendance_repo: "AttendanceRepository" = Depends(get_attendance_repository),
) -> "RegisterAttendanceHandler":
    """Get RegisterAttendance command handler (request-scoped).

    Creates handler with:
    - AttendanceRepository (request-scoped)
    - EventBus (app-scoped)
    - Logger (app-scoped)
    """
    from src.application.commands.handlers.register_attendance_handler import (
        RegisterAttendanceHandler,
    )

    return RegisterAttendanceHandler(
        attendance_repo=attendance_repo,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_check_in_attendance_handler(
    attendance_repo: "AttendanceRepository" = Depends(get_attendance_repository),
) -> "CheckInAttendanceHandler":
    """Get CheckInAttendance command handler (request-scoped)."""
    from src.application.commands.handlers.check_in_attendance_handler import (
        CheckInAttendanceHandler,
    )

    return CheckInAttendanceHandler(
        attendance_repo=attendance_repo,
        event_bus=get_event_bus(),
    )


async def get_check_out_attendance_handler(
    attendance_repo: "AttendanceRepository" = Depends(get_attendance_repository),
) -> "CheckOutAttendanceHandler":
    """Get CheckOutAttendance command handler (request-scoped)."""
    from src.application.commands.handlers.check_out_attendance_handler import (
        CheckOutAttendanceHandler,
    )

    return CheckOutAttendanceHandler(
        attendance_repo=attendance_repo,
        event_bus=get_event_bus(),
    )


async def get_cancel_attendance_handler(
    attendance_repo: "AttendanceRepository" = Depends(get_attendance_repository),
) -> "CancelAttendanceHandler":
    """Get CancelAttendance command handler (request-scoped)."""
    from src.application.commands.handlers.cancel_attendance_handler import (
        CancelAttendanceHandler,
    )

    return CancelAttendanceHandler(
        attendance_repo=attendance_repo,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_update_attendance_handler(
    attendance_repo: "AttendanceRepository" = Depends(get_attendance_repository),
) -> "UpdateAttendanceHandler":
    """Get UpdateAttendance command handler (request-scoped)."""
    from src.application.commands.handlers.update_attendance_handler import (
        UpdateAttendanceHandler,
    )

    return UpdateAttendanceHandler(
        attendance_repo=attendance_repo,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


async def get_cancel_attendance_and_refund_handler(
    payment_repo: "PaymentRepository" = Depends(get_payment_repository),
    cancel_handler: "CancelAttendanceHandler" = Depends(get_cancel_attendance_handler),
    refund_handler: "RefundPaymentHandler" = Depends(get_refund_payment_handler),
) -> "CancelAttendanceAndRefundHandler":
    """Get CancelAttendanceAndRefund orchestration handler (request-scoped).

    Composes the cancel and refund handlers; every collaborator shares the
    request's database session.
    """
    from src.application.commands.handlers.cancel_attendance_and_refund_handler import (
        CancelAttendanceAndRefundHandler,
    )

    return CancelAttendanceAndRefundHandler(
        cancel_handler=cancel_handler,
        refund_handler=refund_handler,
        payment_repo=payment_repo,
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


# ============================================================================
# Attendance Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_get_attendance_handler(
    attendance_repo: "AttendanceRepository" = Depends(get_attendance_repository),
) -> "GetAttendanceHandler":
    """Get GetAttendance query handler (request-scoped)."""
    from src.application.queries.handlers.get_attendance_handler import (
        GetAttendanceHandler,
    )

    return GetAttendanceHandler(attendance_repo=attendance_repo)


async def get_attendance_status_handler(
    attendance_repo: "AttendanceRepository" = Depends(get_attendance_repository),
) -> "GetAttendanceStatusHandler":
    """Get GetAttendanceStatus query handler (request-scoped)."""
    from src.application.queries.handlers.get_attendance_handler import (
        GetAttendanceStatusHandler,
    )

    return GetAttendanceStatusHandler(attendance_repo=attendance_repo)


async def get_list_event_attendances_handler(
    attendance_repo: "AttendanceRepository" = Depends(get_attendance_repository),
) -> "ListEventAttendancesHandler":
    """Get ListEventAttendances query handler (request-scoped)."""
    from src.application.queries.handlers.list_attendances_handler import (
        ListEventAttendancesHandler,
    )

    return ListEventAttendancesHandler(attendance_repo=attendance_repo)


async def get_list_user_attendances_handler(
    attendance_repo: "AttendanceRepository" = Depends(get_attendance_repository),
) -> "ListUserAttendancesHandler":
    """Get ListUserAttendances query handler (request-scoped)."""
    from src.application.queries.handlers.list_attendances_handler import (
        ListUserAttendancesHandler,
    )

    return ListUserAttendancesHandler(attendance_repo=attendance_repo)


async def get_search_attendances_handler(
    attendance_repo: "AttendanceRepository" = Depends(get_attendance_repository),
) -> "SearchAttendancesHandler":
    """Get SearchAttendances query handler (request-scoped).

    The page size ceiling comes from settings.max_page_size.
    """
    from src.application.queries.handlers.list_attendances_handler import (
        SearchAttendancesHandler,
    )

    return SearchAttendancesHandler(
        attendance_repo=attendance_repo,
        max_page_size=settings.max_page_size,
    )
