"""Attendance commands (CQRS write operations).

Commands represent intent to change attendance state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Identifiers are typed optional because handlers validate presence before
any lookup; a missing identifier is a ValidationError, not a crash.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterAttendance:
    """Register a user for an event.

    Attributes:
        event_id: Event to attend.
        user_id: Attending user.
        notes: Optional notes (max 500 characters).

    Example:
        >>> command = RegisterAttendance(event_id=event_id, user_id=user_id)
        >>> result = await handler.handle(command)
    """

    event_id: UUID | None
    user_id: UUID | None
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class CheckInAttendance:
    """Check a registered user in at the event."""

    event_id: UUID | None
    user_id: UUID | None


@dataclass(frozen=True, kw_only=True)
class CheckOutAttendance:
    """Check a checked-in user out of the event."""

    event_id: UUID | None
    user_id: UUID | None


@dataclass(frozen=True, kw_only=True)
class CancelAttendance:
    """Cancel a user's attendance (from any non-cancelled state)."""

    event_id: UUID | None
    user_id: UUID | None


@dataclass(frozen=True, kw_only=True)
class UpdateAttendance:
    """Edit an attendance by id.

    Without ``force`` a status change must follow the attendance state
    machine. With ``force`` the status is set as an administrative override.

    Attributes:
        attendance_id: Attendance to edit.
        status: New status as a raw string, or None to keep the current one.
        notes: New notes, or None to keep the current ones.
        clear_notes: Remove the notes (takes precedence over ``notes``).
        force: Bypass the transition table for ``status``.
    """

    attendance_id: UUID | None
    status: str | None = None
    notes: str | None = None
    clear_notes: bool = False
    force: bool = False


@dataclass(frozen=True, kw_only=True)
class CancelAttendanceAndRefund:
    """Cancel an attendance and refund every completed payment of the pair.

    Attributes:
        event_id: Event the user registered for.
        user_id: Registered user.
        reason: Refund reason stored on each refunded payment.
    """

    event_id: UUID | None
    user_id: UUID | None
    reason: str | None = None
