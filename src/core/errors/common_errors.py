"""Common error classes used across all domains and layers.

These are generic errors that don't belong to any specific domain.
They are used throughout the application for common failure scenarios.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found
- ConflictError: Resource conflicts (duplicates, concurrent writes)
- AlreadyCancelledError: Cancelling something that is already cancelled
- InvalidStateError: State machine transition not allowed

Usage:
    from src.core.errors import ValidationError, NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.VALUE_TOO_LONG,
        message="notes must be at most 500 characters",
        field="notes",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Attendance, Payment, etc.).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, concurrent modification).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (status, user_id, etc.).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AlreadyCancelledError(ConflictError):
    """Cancellation requested for a resource that is already cancelled."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidStateError(DomainError):
    """State machine transition not allowed from the current state.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource whose state was checked.
        current_state: State the resource is in.
        attempted_action: Transition that was refused.
        details: Additional context.
    """

    resource_type: str
    current_state: str
    attempted_action: str
