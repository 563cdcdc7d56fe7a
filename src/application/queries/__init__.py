"""Query definitions (CQRS read side)."""

from src.application.queries.attendance_queries import (
    GetAttendance,
    GetAttendanceStatus,
    ListEventAttendances,
    ListUserAttendances,
    SearchAttendances,
)
from src.application.queries.dashboard_queries import GetAdminDashboard
from src.application.queries.payment_queries import (
    CheckPaymentStatus,
    GetPayment,
    GetPaymentStats,
    GetTotalRevenue,
    ListEventPayments,
    ListUserPayments,
    SearchPayments,
)

__all__ = [
    # Attendance
    "GetAttendance",
    "GetAttendanceStatus",
    "ListEventAttendances",
    "ListUserAttendances",
    "SearchAttendances",
    # Payment
    "CheckPaymentStatus",
    "GetPayment",
    "GetPaymentStats",
    "GetTotalRevenue",
    "ListEventPayments",
    "ListUserPayments",
    "SearchPayments",
    # Dashboard
    "GetAdminDashboard",
]
