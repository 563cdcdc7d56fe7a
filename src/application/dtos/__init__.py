"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by command and query handlers.
They transfer data from the application layer to the presentation layer.

Categories:
    - attendance_dtos: Attendance handler results
    - payment_dtos: Payment handler results and statistics
    - dashboard_dtos: Admin dashboard aggregates

Note:
    DTOs are NOT the same as:
    - Domain protocol data types (port interface contracts in domain layer)
    - API schemas (Pydantic models in src/schemas)
"""

from src.application.dtos.attendance_dtos import (
    AttendanceListResult,
    AttendanceResult,
    AttendanceStatusResult,
    CancellationOutcome,
    RefundFailure,
)
from src.application.dtos.dashboard_dtos import (
    AdminDashboardResult,
    CategoryStats,
    OrganizerStats,
    PeriodAmount,
    PeriodCount,
)
from src.application.dtos.payment_dtos import (
    PaymentResult,
    PaymentStatsResult,
    PaymentStatusCheckResult,
    RevenueResult,
)

__all__ = [
    # Attendance DTOs
    "AttendanceListResult",
    "AttendanceResult",
    "AttendanceStatusResult",
    "CancellationOutcome",
    "RefundFailure",
    # Payment DTOs
    "PaymentResult",
    "PaymentStatsResult",
    "PaymentStatusCheckResult",
    "RevenueResult",
    # Dashboard DTOs
    "AdminDashboardResult",
    "CategoryStats",
    "OrganizerStats",
    "PeriodAmount",
    "PeriodCount",
]
