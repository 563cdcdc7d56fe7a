"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import AttendanceError, PaymentError
    from src.domain.errors import PaymentProcessorError
"""

from src.domain.errors.attendance_error import AttendanceError
from src.domain.errors.payment_error import PaymentError
from src.domain.errors.payment_processor_error import (
    PaymentProcessorError,
    PaymentProcessorRejectedError,
    PaymentProcessorUnavailableError,
    UnsupportedPaymentProviderError,
)

__all__ = [
    "AttendanceError",
    "PaymentError",
    # Payment processor errors
    "PaymentProcessorError",
    "PaymentProcessorRejectedError",
    "PaymentProcessorUnavailableError",
    "UnsupportedPaymentProviderError",
]
