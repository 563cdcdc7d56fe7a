"""API Route Registry - Single Source of Truth for all routes.

This module contains ROUTE_REGISTRY, the authoritative list of all v1 API
endpoints. The registry is used to generate FastAPI routes and OpenAPI
metadata at application startup.

Registry structure:
    - Each entry is a RouteMetadata instance declaring one endpoint
    - Handlers reference actual functions from router modules
    - Literal sub-paths are listed before parameterized siblings

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.v1.attendances import (
    cancel_attendance,
    cancel_attendance_and_refund,
    check_in_attendance,
    check_out_attendance,
    get_attendance,
    get_attendance_status,
    list_event_attendances,
    list_user_attendances,
    register_attendance,
    search_attendances,
    update_attendance,
)
from src.presentation.routers.api.v1.dashboard import get_admin_dashboard
from src.presentation.routers.api.v1.payments import (
    cancel_payment,
    check_payment_status,
    create_payment,
    get_payment,
    get_payment_stats,
    get_total_revenue,
    list_event_payments,
    list_user_payments,
    process_payment,
    purchase_ticket,
    refund_payment,
    search_payments,
)
from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.attendance_schemas import (
    AttendanceListResponse,
    AttendanceResponse,
    AttendanceStatusResponse,
    CancellationOutcomeResponse,
)
from src.schemas.dashboard_schemas import AdminDashboardResponse
from src.schemas.payment_schemas import (
    PaymentListResponse,
    PaymentResponse,
    PaymentStatsResponse,
    PaymentStatusCheckResponse,
    RevenueResponse,
)

_VALIDATION = ErrorSpec(status=400, description="Validation error")
_ATTENDANCE_NOT_FOUND = ErrorSpec(status=404, description="Attendance not found")
_PAYMENT_NOT_FOUND = ErrorSpec(status=404, description="Payment not found")
_INVALID_STATE = ErrorSpec(status=409, description="Transition not allowed from current state")
_PROCESSOR = ErrorSpec(status=502, description="Payment processor error")

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Attendances
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/attendances",
        handler=register_attendance,
        resource="attendances",
        tags=["Attendances"],
        summary="Register attendance",
        description="Register a user for an event. At most one active registration per pair.",
        operation_id="register_attendance",
        response_model=AttendanceResponse,
        status_code=201,
        errors=[
            _VALIDATION,
            ErrorSpec(status=409, description="User already registered for the event"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/attendances",
        handler=search_attendances,
        resource="attendances",
        tags=["Attendances"],
        summary="Search attendances",
        description="Paginated attendance search, newest first.",
        operation_id="search_attendances",
        response_model=AttendanceListResponse,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/attendances/{attendance_id}",
        handler=get_attendance,
        resource="attendances",
        tags=["Attendances"],
        summary="Get attendance",
        operation_id="get_attendance",
        response_model=AttendanceResponse,
        errors=[_ATTENDANCE_NOT_FOUND],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/attendances/{attendance_id}",
        handler=update_attendance,
        resource="attendances",
        tags=["Attendances"],
        summary="Update attendance",
        description="Edit notes or status. `force` bypasses the transition rules.",
        operation_id="update_attendance",
        response_model=AttendanceResponse,
        errors=[_VALIDATION, _ATTENDANCE_NOT_FOUND, _INVALID_STATE],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}/attendances",
        handler=list_event_attendances,
        resource="attendances",
        tags=["Attendances"],
        summary="List event attendances",
        operation_id="list_event_attendances",
        response_model=AttendanceListResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/{user_id}/attendances",
        handler=list_user_attendances,
        resource="attendances",
        tags=["Attendances"],
        summary="List user attendances",
        operation_id="list_user_attendances",
        response_model=AttendanceListResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}/attendances/{user_id}",
        handler=get_attendance_status,
        resource="attendances",
        tags=["Attendances"],
        summary="Get attendance status",
        description="Latest registration status of a user for an event.",
        operation_id="get_attendance_status",
        response_model=AttendanceStatusResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/attendances/{user_id}/check-in",
        handler=check_in_attendance,
        resource="attendances",
        tags=["Attendances"],
        summary="Check in",
        operation_id="check_in_attendance",
        response_model=AttendanceResponse,
        errors=[_ATTENDANCE_NOT_FOUND, _INVALID_STATE],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/attendances/{user_id}/check-out",
        handler=check_out_attendance,
        resource="attendances",
        tags=["Attendances"],
        summary="Check out",
        operation_id="check_out_attendance",
        response_model=AttendanceResponse,
        errors=[_ATTENDANCE_NOT_FOUND, _INVALID_STATE],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/attendances/{user_id}/cancel",
        handler=cancel_attendance,
        resource="attendances",
        tags=["Attendances"],
        summary="Cancel attendance",
        operation_id="cancel_attendance",
        response_model=AttendanceResponse,
        errors=[
            _ATTENDANCE_NOT_FOUND,
            ErrorSpec(status=409, description="Attendance already cancelled"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/attendances/{user_id}/cancel-and-refund",
        handler=cancel_attendance_and_refund,
        resource="attendances",
        tags=["Attendances"],
        summary="Cancel attendance and refund payments",
        description=(
            "Cancel the registration, then refund every completed payment of the "
            "user for the event. Refund failures are reported, not rolled back."
        ),
        operation_id="cancel_attendance_and_refund",
        response_model=CancellationOutcomeResponse,
        errors=[
            _ATTENDANCE_NOT_FOUND,
            ErrorSpec(status=409, description="Attendance already cancelled"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    # =========================================================================
    # Payments
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/payments",
        handler=create_payment,
        resource="payments",
        tags=["Payments"],
        summary="Create payment",
        description="Create a pending payment. Nothing is charged yet.",
        operation_id="create_payment",
        response_model=PaymentResponse,
        status_code=201,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/payments/purchase",
        handler=purchase_ticket,
        resource="payments",
        tags=["Payments"],
        summary="Purchase ticket",
        description="Create a payment and charge it in one call.",
        operation_id="purchase_ticket",
        response_model=PaymentResponse,
        status_code=201,
        errors=[_VALIDATION, _PROCESSOR],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/payments",
        handler=search_payments,
        resource="payments",
        tags=["Payments"],
        summary="Search payments",
        operation_id="search_payments",
        response_model=PaymentListResponse,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/payments/stats",
        handler=get_payment_stats,
        resource="payments",
        tags=["Payments"],
        summary="Payment statistics",
        operation_id="get_payment_stats",
        response_model=PaymentStatsResponse,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/payments/revenue",
        handler=get_total_revenue,
        resource="payments",
        tags=["Payments"],
        summary="Total revenue",
        operation_id="get_total_revenue",
        response_model=RevenueResponse,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/payments/{payment_id}",
        handler=get_payment,
        resource="payments",
        tags=["Payments"],
        summary="Get payment",
        operation_id="get_payment",
        response_model=PaymentResponse,
        errors=[_PAYMENT_NOT_FOUND],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/payments/{payment_id}/processor-status",
        handler=check_payment_status,
        resource="payments",
        tags=["Payments"],
        summary="Check processor status",
        description="Ask the processor for the payment's status. Does not modify the payment.",
        operation_id="check_payment_status",
        response_model=PaymentStatusCheckResponse,
        errors=[_PAYMENT_NOT_FOUND, _PROCESSOR],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/payments/{payment_id}/process",
        handler=process_payment,
        resource="payments",
        tags=["Payments"],
        summary="Process payment",
        operation_id="process_payment",
        response_model=PaymentResponse,
        errors=[_VALIDATION, _PAYMENT_NOT_FOUND, _INVALID_STATE, _PROCESSOR],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/payments/{payment_id}/refund",
        handler=refund_payment,
        resource="payments",
        tags=["Payments"],
        summary="Refund payment",
        operation_id="refund_payment",
        response_model=PaymentResponse,
        errors=[_PAYMENT_NOT_FOUND, _VALIDATION, _PROCESSOR],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/payments/{payment_id}/cancel",
        handler=cancel_payment,
        resource="payments",
        tags=["Payments"],
        summary="Cancel payment",
        operation_id="cancel_payment",
        response_model=PaymentResponse,
        errors=[_PAYMENT_NOT_FOUND, _INVALID_STATE, _PROCESSOR],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/{user_id}/payments",
        handler=list_user_payments,
        resource="payments",
        tags=["Payments"],
        summary="List user payments",
        operation_id="list_user_payments",
        response_model=PaymentListResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}/payments",
        handler=list_event_payments,
        resource="payments",
        tags=["Payments"],
        summary="List event payments",
        operation_id="list_event_payments",
        response_model=PaymentListResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    # =========================================================================
    # Dashboard
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/dashboard/admin",
        handler=get_admin_dashboard,
        resource="dashboard",
        tags=["Dashboard"],
        summary="Admin dashboard",
        description="Platform-wide users, events, revenue and organizer statistics.",
        operation_id="get_admin_dashboard",
        response_model=AdminDashboardResponse,
        errors=[_VALIDATION],
        idempotency=IdempotencyLevel.SAFE,
    ),
]
