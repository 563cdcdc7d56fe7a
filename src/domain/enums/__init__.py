"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.
Every enum parses raw strings fail-closed: unknown input raises ValueError
instead of falling back to a default member.

Available Enums:
    - AttendanceStatus: Attendance state machine
    - PaymentStatus: Payment state machine
    - PaymentProvider: Who moves the money
    - PaymentMethod: Instrument used by the payer
    - Currency: Supported ISO 4217 currencies
    - RevenueTimeframe: Windows for revenue totals
"""

from src.domain.enums.attendance_status import AttendanceStatus
from src.domain.enums.currency import Currency
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.enums.revenue_timeframe import RevenueTimeframe

__all__ = [
    "AttendanceStatus",
    "Currency",
    "PaymentMethod",
    "PaymentProvider",
    "PaymentStatus",
    "RevenueTimeframe",
]
