"""Command definitions (CQRS write side).

Usage:
    from src.application.commands import RegisterAttendance, ProcessPayment
"""

from src.application.commands.attendance_commands import (
    CancelAttendance,
    CancelAttendanceAndRefund,
    CheckInAttendance,
    CheckOutAttendance,
    RegisterAttendance,
    UpdateAttendance,
)
from src.application.commands.payment_commands import (
    CancelPayment,
    CreatePayment,
    ProcessPayment,
    PurchaseTicket,
    RefundPayment,
)

__all__ = [
    # Attendance
    "RegisterAttendance",
    "CheckInAttendance",
    "CheckOutAttendance",
    "CancelAttendance",
    "UpdateAttendance",
    "CancelAttendanceAndRefund",
    # Payment
    "CreatePayment",
    "ProcessPayment",
    "PurchaseTicket",
    "RefundPayment",
    "CancelPayment",
]
