"""Application layer error types.

Application errors wrap domain errors returned by command/query handlers and
classify them for the presentation layer (HTTP status mapping).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import (
    ConflictError,
    DomainError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from src.domain.errors.payment_processor_error import (
    PaymentProcessorError,
    UnsupportedPaymentProviderError,
)


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ...     message="notes must be at most 500 characters",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_STATE = "invalid_state"
    EXTERNAL_SERVICE_ERROR = "external_service_error"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain_error(
        cls, error: DomainError, *, is_query: bool = False
    ) -> "ApplicationError":
        """Classify a handler's domain error.

        Args:
            error: Error returned inside a handler Failure.
            is_query: Classify validation failures as query failures.

        Returns:
            ApplicationError wrapping ``error``.
        """
        match error:
            case ValidationError():
                code = (
                    ApplicationErrorCode.QUERY_VALIDATION_FAILED
                    if is_query
                    else ApplicationErrorCode.COMMAND_VALIDATION_FAILED
                )
            case NotFoundError():
                code = ApplicationErrorCode.NOT_FOUND
            case ConflictError():
                code = ApplicationErrorCode.CONFLICT
            case InvalidStateError():
                code = ApplicationErrorCode.INVALID_STATE
            case UnsupportedPaymentProviderError():
                code = ApplicationErrorCode.COMMAND_VALIDATION_FAILED
            case PaymentProcessorError():
                code = ApplicationErrorCode.EXTERNAL_SERVICE_ERROR
            case _:
                code = (
                    ApplicationErrorCode.QUERY_FAILED
                    if is_query
                    else ApplicationErrorCode.COMMAND_EXECUTION_FAILED
                )
        return cls(code=code, message=error.message, domain_error=error)
