"""Factories for the domain errors returned by lifecycle handlers.

Keeps error codes and messages consistent across the attendance and
payment handlers.
"""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import (
    AlreadyCancelledError,
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from src.domain.enums.attendance_status import AttendanceStatus
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.attendance_error import AttendanceError
from src.domain.errors.payment_error import PaymentError
from src.domain.errors.payment_processor_error import (
    PaymentProcessorError,
    PaymentProcessorRejectedError,
)


def attendance_not_found(
    *,
    attendance_id: UUID | None = None,
    event_id: UUID | None = None,
    user_id: UUID | None = None,
) -> NotFoundError:
    if attendance_id is not None:
        return NotFoundError(
            code=ErrorCode.ATTENDANCE_NOT_FOUND,
            message=AttendanceError.NOT_FOUND,
            resource_type="Attendance",
            resource_id=str(attendance_id),
        )
    return NotFoundError(
        code=ErrorCode.ATTENDANCE_NOT_FOUND,
        message=AttendanceError.NOT_REGISTERED,
        resource_type="Attendance",
        resource_id=f"{event_id}:{user_id}",
        details={"event_id": str(event_id), "user_id": str(user_id)},
    )


def already_registered(event_id: UUID, user_id: UUID) -> ConflictError:
    return ConflictError(
        code=ErrorCode.ATTENDANCE_ALREADY_REGISTERED,
        message=AttendanceError.ALREADY_REGISTERED,
        resource_type="Attendance",
        conflicting_field="user_id",
        details={"event_id": str(event_id), "user_id": str(user_id)},
    )


def already_cancelled(attendance_id: UUID) -> AlreadyCancelledError:
    return AlreadyCancelledError(
        code=ErrorCode.ATTENDANCE_ALREADY_CANCELLED,
        message=AttendanceError.ALREADY_CANCELLED,
        resource_type="Attendance",
        conflicting_field="status",
        details={"attendance_id": str(attendance_id)},
    )


def invalid_attendance_state(
    message: str, current: AttendanceStatus, action: str
) -> InvalidStateError:
    return InvalidStateError(
        code=ErrorCode.INVALID_STATE_TRANSITION,
        message=message,
        resource_type="Attendance",
        current_state=current.value,
        attempted_action=action,
    )


def attendance_concurrently_modified(attendance_id: UUID) -> ConflictError:
    return ConflictError(
        code=ErrorCode.CONCURRENT_MODIFICATION,
        message=AttendanceError.CONCURRENT_MODIFICATION,
        resource_type="Attendance",
        conflicting_field="status",
        details={"attendance_id": str(attendance_id)},
    )


def payment_not_found(payment_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.PAYMENT_NOT_FOUND,
        message=PaymentError.NOT_FOUND,
        resource_type="Payment",
        resource_id=str(payment_id),
    )


def invalid_payment_state(
    message: str, current: PaymentStatus, action: str
) -> InvalidStateError:
    return InvalidStateError(
        code=ErrorCode.INVALID_STATE_TRANSITION,
        message=message,
        resource_type="Payment",
        current_state=current.value,
        attempted_action=action,
    )


def payment_not_refundable(status: PaymentStatus) -> ValidationError:
    """Refund refusal: "already refunded" or "only completed payments"."""
    if status == PaymentStatus.REFUNDED:
        return ValidationError(
            code=ErrorCode.PAYMENT_ALREADY_REFUNDED,
            message=PaymentError.ALREADY_REFUNDED,
            field="status",
        )
    return ValidationError(
        code=ErrorCode.PAYMENT_NOT_REFUNDABLE,
        message=PaymentError.ONLY_COMPLETED_REFUNDABLE,
        field="status",
        details={"status": status.value},
    )


def payment_concurrently_modified(payment_id: UUID) -> ConflictError:
    return ConflictError(
        code=ErrorCode.CONCURRENT_MODIFICATION,
        message=PaymentError.CONCURRENT_MODIFICATION,
        resource_type="Payment",
        conflicting_field="status",
        details={"payment_id": str(payment_id)},
    )


def processor_call_failed(provider: str, exc: Exception) -> PaymentProcessorError:
    """Wrap an exception raised by a processor into a processor error."""
    return PaymentProcessorError(
        code=ErrorCode.PAYMENT_PROCESSOR_ERROR,
        message=str(exc) or type(exc).__name__,
        provider_name=provider,
        details={"exception_type": type(exc).__name__},
    )


def processor_reported_failure(
    provider: str,
    provider_payment_id: str,
    message: str = "Processor reported the payment as failed",
) -> PaymentProcessorRejectedError:
    return PaymentProcessorRejectedError(
        code=ErrorCode.PAYMENT_PROCESSOR_REJECTED,
        message=message,
        provider_name=provider,
        details={"provider_payment_id": provider_payment_id},
    )
