"""Attendances resource handlers.

Handler functions for attendance endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    register_attendance       - Register a user for an event
    search_attendances        - Paginated search
    get_attendance            - Get attendance details
    update_attendance         - Partial update (notes, status, forced status)
    list_event_attendances    - All attendances of an event
    list_user_attendances     - All attendances of a user
    get_attendance_status     - Registration status of a user for an event
    check_in_attendance       - Check a registered user in
    check_out_attendance      - Check a checked-in user out
    cancel_attendance         - Cancel the registration
    cancel_attendance_and_refund - Cancel and refund completed payments
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from src.application.commands.attendance_commands import (
    CancelAttendance,
    CancelAttendanceAndRefund,
    CheckInAttendance,
    CheckOutAttendance,
    RegisterAttendance,
    UpdateAttendance,
)
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
from src.application.commands.handlers.register_attendance_handler import (
    RegisterAttendanceHandler,
)
from src.application.commands.handlers.update_attendance_handler import (
    UpdateAttendanceHandler,
)
from src.application.queries.attendance_queries import (
    GetAttendance,
    GetAttendanceStatus,
    ListEventAttendances,
    ListUserAttendances,
    SearchAttendances,
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
from src.core.config import settings
from src.core.container import (
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
from src.core.result import Failure
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.attendance_schemas import (
    AttendanceListResponse,
    AttendanceResponse,
    AttendanceStatusResponse,
    CancelAndRefundRequest,
    CancellationOutcomeResponse,
    RegisterAttendanceRequest,
    UpdateAttendanceRequest,
)

EventId = Annotated[UUID, Path(description="Event UUID")]
UserId = Annotated[UUID, Path(description="User UUID")]


# =============================================================================
# Attendance Collection
# =============================================================================


async def register_attendance(
    request: Request,
    data: RegisterAttendanceRequest,
    handler: RegisterAttendanceHandler = Depends(get_register_attendance_handler),
) -> AttendanceResponse | JSONResponse:
    """Register a user for an event.

    POST /api/v1/attendances → 201 Created

    Returns:
        AttendanceResponse with the new registration.
        JSONResponse with RFC 9457 error on failure (409 when already registered).
    """
    command = RegisterAttendance(
        event_id=data.event_id,
        user_id=data.user_id,
        notes=data.notes,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return AttendanceResponse.from_dto(result.value)


async def search_attendances(
    request: Request,
    page: Annotated[int, Query(description="Page number (1-indexed)")] = 1,
    limit: Annotated[
        int, Query(description="Items per page")
    ] = settings.default_page_size,
    event_id: Annotated[UUID | None, Query(description="Filter by event")] = None,
    user_id: Annotated[UUID | None, Query(description="Filter by user")] = None,
    handler: SearchAttendancesHandler = Depends(get_search_attendances_handler),
) -> AttendanceListResponse | JSONResponse:
    """Search attendances, newest first.

    GET /api/v1/attendances → 200 OK
    """
    query = SearchAttendances(
        page=page,
        limit=limit,
        event_id=event_id,
        user_id=user_id,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return AttendanceListResponse.from_dto(result.value)


async def get_attendance(
    request: Request,
    attendance_id: Annotated[UUID, Path(description="Attendance UUID")],
    handler: GetAttendanceHandler = Depends(get_get_attendance_handler),
) -> AttendanceResponse | JSONResponse:
    """Get a specific attendance.

    GET /api/v1/attendances/{attendance_id} → 200 OK
    """
    result = await handler.handle(GetAttendance(attendance_id=attendance_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return AttendanceResponse.from_dto(result.value)


async def update_attendance(
    request: Request,
    attendance_id: Annotated[UUID, Path(description="Attendance UUID")],
    data: UpdateAttendanceRequest,
    handler: UpdateAttendanceHandler = Depends(get_update_attendance_handler),
) -> AttendanceResponse | JSONResponse:
    """Partially update an attendance.

    PATCH /api/v1/attendances/{attendance_id} → 200 OK

    A status change follows the transition rules unless ``force`` is set.
    """
    command = UpdateAttendance(
        attendance_id=attendance_id,
        status=data.status,
        notes=data.notes,
        clear_notes=data.clear_notes,
        force=data.force,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return AttendanceResponse.from_dto(result.value)


# =============================================================================
# Event / User scoped
# =============================================================================


async def list_event_attendances(
    request: Request,
    event_id: EventId,
    handler: ListEventAttendancesHandler = Depends(get_list_event_attendances_handler),
) -> AttendanceListResponse | JSONResponse:
    """List all attendances of an event.

    GET /api/v1/events/{event_id}/attendances → 200 OK
    """
    result = await handler.handle(ListEventAttendances(event_id=event_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return AttendanceListResponse.from_dto(result.value)


async def list_user_attendances(
    request: Request,
    user_id: UserId,
    handler: ListUserAttendancesHandler = Depends(get_list_user_attendances_handler),
) -> AttendanceListResponse | JSONResponse:
    """List all attendances of a user.

    GET /api/v1/users/{user_id}/attendances → 200 OK
    """
    result = await handler.handle(ListUserAttendances(user_id=user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return AttendanceListResponse.from_dto(result.value)


async def get_attendance_status(
    request: Request,
    event_id: EventId,
    user_id: UserId,
    handler: GetAttendanceStatusHandler = Depends(get_attendance_status_handler),
) -> AttendanceStatusResponse | JSONResponse:
    """Registration status of a user for an event.

    GET /api/v1/events/{event_id}/attendances/{user_id} → 200 OK
    """
    result = await handler.handle(GetAttendanceStatus(event_id=event_id, user_id=user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, is_query=True)

    return AttendanceStatusResponse.from_dto(result.value)


async def check_in_attendance(
    request: Request,
    event_id: EventId,
    user_id: UserId,
    handler: CheckInAttendanceHandler = Depends(get_check_in_attendance_handler),
) -> AttendanceResponse | JSONResponse:
    """Check a registered user in.

    POST /api/v1/events/{event_id}/attendances/{user_id}/check-in → 200 OK
    """
    result = await handler.handle(CheckInAttendance(event_id=event_id, user_id=user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return AttendanceResponse.from_dto(result.value)


async def check_out_attendance(
    request: Request,
    event_id: EventId,
    user_id: UserId,
    handler: CheckOutAttendanceHandler = Depends(get_check_out_attendance_handler),
) -> AttendanceResponse | JSONResponse:
    """Check a checked-in user out.

    POST /api/v1/events/{event_id}/attendances/{user_id}/check-out → 200 OK
    """
    result = await handler.handle(CheckOutAttendance(event_id=event_id, user_id=user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return AttendanceResponse.from_dto(result.value)


async def cancel_attendance(
    request: Request,
    event_id: EventId,
    user_id: UserId,
    handler: CancelAttendanceHandler = Depends(get_cancel_attendance_handler),
) -> AttendanceResponse | JSONResponse:
    """Cancel a registration.

    POST /api/v1/events/{event_id}/attendances/{user_id}/cancel → 200 OK
    """
    result = await handler.handle(CancelAttendance(event_id=event_id, user_id=user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return AttendanceResponse.from_dto(result.value)


async def cancel_attendance_and_refund(
    request: Request,
    event_id: EventId,
    user_id: UserId,
    data: CancelAndRefundRequest | None = None,
    handler: CancelAttendanceAndRefundHandler = Depends(
        get_cancel_attendance_and_refund_handler
    ),
) -> CancellationOutcomeResponse | JSONResponse:
    """Cancel a registration and refund the user's completed payments.

    POST /api/v1/events/{event_id}/attendances/{user_id}/cancel-and-refund → 200 OK

    Refund failures do not undo the cancellation; they are listed in
    ``failed_refunds``.
    """
    command = CancelAttendanceAndRefund(
        event_id=event_id,
        user_id=user_id,
        reason=data.reason if data else None,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)

    return CancellationOutcomeResponse.from_dto(result.value)
