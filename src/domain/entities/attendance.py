"""Attendance domain entity.

Represents one user's participation in one event and enforces the
attendance state machine.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Uses Result types (railway-oriented programming)
    - NO event collection (handlers create events)
    - State machine with validated transitions

Usage:
    from uuid_extensions import uuid7
    from src.domain.entities import Attendance

    attendance = Attendance(id=uuid7(), event_id=event_id, user_id=user_id)

    result = attendance.check_in()
    match result:
        case Success(_):
            assert attendance.status == AttendanceStatus.CHECKED_IN
        case Failure(error):
            # error is an AttendanceError message
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.core.result import Failure, Result, Success
from src.domain.enums.attendance_status import AttendanceStatus
from src.domain.errors.attendance_error import AttendanceError

MAX_NOTES_LENGTH = 500


@dataclass
class Attendance:
    """A user's attendance at an event.

    State Machine:
        REGISTERED → CHECKED_IN → CHECKED_OUT
        REGISTERED/CHECKED_IN/CHECKED_OUT → CANCELLED

    Railway-Oriented Programming:
        All state transition methods return Result[None, str] instead of
        raising exceptions. The error value is an AttendanceError constant.

    Attributes:
        id: Unique attendance identifier.
        event_id: Event the user registered for.
        user_id: Registered user.
        status: Current lifecycle state.
        check_in_time: When the user checked in.
        check_out_time: When the user checked out.
        notes: Free-form notes (max 500 characters).
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    event_id: UUID
    user_id: UUID
    status: AttendanceStatus = AttendanceStatus.REGISTERED
    check_in_time: datetime | None = None
    check_out_time: datetime | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate attendance after initialization.

        Raises:
            ValueError: If notes are too long or the check-in/out times
                are inconsistent.
        """
        if self.notes is not None and len(self.notes) > MAX_NOTES_LENGTH:
            raise ValueError(AttendanceError.NOTES_TOO_LONG)

        if self.check_out_time is not None:
            if self.check_in_time is None:
                raise ValueError(AttendanceError.CHECK_OUT_WITHOUT_CHECK_IN)
            if self.check_out_time < self.check_in_time:
                raise ValueError(AttendanceError.CHECK_OUT_BEFORE_CHECK_IN)

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def is_active(self) -> bool:
        """Check if this attendance occupies the user's slot for the event.

        Returns:
            bool: True unless cancelled.
        """
        return self.status.is_active

    def is_checked_in(self) -> bool:
        return self.status == AttendanceStatus.CHECKED_IN

    # -------------------------------------------------------------------------
    # State Transition Methods (Return Result)
    # -------------------------------------------------------------------------

    def check_in(self) -> Result[None, str]:
        """Transition REGISTERED → CHECKED_IN.

        Returns:
            Success(None): Transition successful.
            Failure(error): Attendance is not REGISTERED.

        Side Effects (on success):
            - Sets status to CHECKED_IN
            - Sets check_in_time
            - Updates updated_at
        """
        if not self.status.can_transition_to(AttendanceStatus.CHECKED_IN):
            return Failure(error=AttendanceError.CANNOT_CHECK_IN)

        now = datetime.now(UTC)
        self.status = AttendanceStatus.CHECKED_IN
        self.check_in_time = now
        self.updated_at = now
        return Success(value=None)

    def check_out(self) -> Result[None, str]:
        """Transition CHECKED_IN → CHECKED_OUT.

        Returns:
            Success(None): Transition successful.
            Failure(error): Attendance is not CHECKED_IN.

        Side Effects (on success):
            - Sets status to CHECKED_OUT
            - Sets check_out_time (never earlier than check_in_time)
            - Updates updated_at
        """
        if not self.status.can_transition_to(AttendanceStatus.CHECKED_OUT):
            return Failure(error=AttendanceError.CANNOT_CHECK_OUT)

        now = datetime.now(UTC)
        if self.check_in_time is None:
            self.check_in_time = now
        self.status = AttendanceStatus.CHECKED_OUT
        self.check_out_time = max(now, self.check_in_time)
        self.updated_at = now
        return Success(value=None)

    def cancel(self) -> Result[None, str]:
        """Transition any active state → CANCELLED.

        Cancelling after check-out is allowed; callers use it as a
        refund trigger.

        Returns:
            Success(None): Transition successful.
            Failure(error): Attendance is already CANCELLED.
        """
        if not self.status.can_transition_to(AttendanceStatus.CANCELLED):
            return Failure(error=AttendanceError.CANNOT_CANCEL)

        self.status = AttendanceStatus.CANCELLED
        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def transition_to(self, target: AttendanceStatus) -> Result[None, str]:
        """Apply a guarded transition chosen at runtime.

        Dispatches to the dedicated transition so timestamps stay consistent.

        Args:
            target: Desired status.

        Returns:
            Success(None): Transition successful (or already in target state).
            Failure(error): Transition not allowed from the current state.
        """
        if target == self.status:
            return Success(value=None)

        match target:
            case AttendanceStatus.CHECKED_IN:
                return self.check_in()
            case AttendanceStatus.CHECKED_OUT:
                return self.check_out()
            case AttendanceStatus.CANCELLED:
                return self.cancel()
            case AttendanceStatus.REGISTERED:
                return Failure(error=AttendanceError.INVALID_STATUS_TRANSITION)

    def force_status(self, target: AttendanceStatus) -> None:
        """Set the status without consulting the transition table.

        Administrative override. Timestamps are adjusted so the check-in /
        check-out invariant still holds for the new status.

        Args:
            target: Status to set.
        """
        now = datetime.now(UTC)
        match target:
            case AttendanceStatus.REGISTERED:
                self.check_in_time = None
                self.check_out_time = None
            case AttendanceStatus.CHECKED_IN:
                self.check_in_time = self.check_in_time or now
                self.check_out_time = None
            case AttendanceStatus.CHECKED_OUT:
                self.check_in_time = self.check_in_time or now
                self.check_out_time = max(self.check_out_time or now, self.check_in_time)
            case AttendanceStatus.CANCELLED:
                pass
        self.status = target
        self.updated_at = now

    def update_notes(self, notes: str | None) -> Result[None, str]:
        """Replace the notes.

        Returns:
            Success(None): Notes updated.
            Failure(error): Notes exceed the maximum length.
        """
        if notes is not None and len(notes) > MAX_NOTES_LENGTH:
            return Failure(error=AttendanceError.NOTES_TOO_LONG)

        self.notes = notes
        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def touch(self) -> None:
        """Stamp updated_at without changing anything else."""
        self.updated_at = datetime.now(UTC)
