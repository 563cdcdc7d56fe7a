"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import RegisterAttendanceRequest, PaymentResponse
"""

from src.schemas.attendance_schemas import (
    AttendanceListResponse,
    AttendanceResponse,
    AttendanceStatusResponse,
    CancelAndRefundRequest,
    CancellationOutcomeResponse,
    RefundFailureResponse,
    RegisterAttendanceRequest,
    UpdateAttendanceRequest,
)
from src.schemas.dashboard_schemas import (
    AdminDashboardResponse,
    CategoryStatsResponse,
    OrganizerStatsResponse,
    PeriodAmountResponse,
    PeriodCountResponse,
)
from src.schemas.payment_schemas import (
    CreatePaymentRequest,
    PaymentListResponse,
    PaymentResponse,
    PaymentStatsResponse,
    PaymentStatusCheckResponse,
    RefundPaymentRequest,
    RevenueResponse,
)

__all__ = [
    # Attendance
    "RegisterAttendanceRequest",
    "UpdateAttendanceRequest",
    "CancelAndRefundRequest",
    "AttendanceResponse",
    "AttendanceListResponse",
    "AttendanceStatusResponse",
    "RefundFailureResponse",
    "CancellationOutcomeResponse",
    # Payment
    "CreatePaymentRequest",
    "RefundPaymentRequest",
    "PaymentResponse",
    "PaymentListResponse",
    "PaymentStatusCheckResponse",
    "PaymentStatsResponse",
    "RevenueResponse",
    # Dashboard
    "PeriodCountResponse",
    "PeriodAmountResponse",
    "OrganizerStatsResponse",
    "CategoryStatsResponse",
    "AdminDashboardResponse",
]
