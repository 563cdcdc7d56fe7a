"""Attendance lifecycle states.

Defines the status state machine for a user's attendance at an event.

State Machine:
    REGISTERED → CHECKED_IN → CHECKED_OUT
         ↘           ↓            ↙
                 CANCELLED

    - REGISTERED: User signed up for the event (initial)
    - CHECKED_IN: User arrived at the event
    - CHECKED_OUT: User left the event (end of the success path)
    - CANCELLED: Attendance withdrawn (terminal)

Usage:
    from src.domain.enums import AttendanceStatus

    if attendance.status.can_transition_to(AttendanceStatus.CHECKED_IN):
        ...
"""

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance lifecycle states.

    String Enum:
        Inherits from str for easy serialization and database storage.
        Values are lowercase for consistency.

    State Transitions:
        REGISTERED → CHECKED_IN: User checks in
        CHECKED_IN → CHECKED_OUT: User checks out
        REGISTERED/CHECKED_IN/CHECKED_OUT → CANCELLED: User or organizer cancels
    """

    REGISTERED = "registered"
    """User is registered but has not arrived yet."""

    CHECKED_IN = "checked_in"
    """User checked in at the event. check_in_time is set."""

    CHECKED_OUT = "checked_out"
    """User checked out. Both check-in and check-out times are set.

    Only cancellation may follow, which callers use to trigger refunds.
    """

    CANCELLED = "cancelled"
    """Attendance withdrawn. Terminal state.

    A new registration for the same event creates a new attendance record.
    """

    def allowed_transitions(self) -> frozenset["AttendanceStatus"]:
        """Get the states reachable from this state in one step.

        Returns:
            frozenset[AttendanceStatus]: Legal target states.
        """
        match self:
            case AttendanceStatus.REGISTERED:
                return frozenset({AttendanceStatus.CHECKED_IN, AttendanceStatus.CANCELLED})
            case AttendanceStatus.CHECKED_IN:
                return frozenset({AttendanceStatus.CHECKED_OUT, AttendanceStatus.CANCELLED})
            case AttendanceStatus.CHECKED_OUT:
                return frozenset({AttendanceStatus.CANCELLED})
            case AttendanceStatus.CANCELLED:
                return frozenset()

    def can_transition_to(self, target: "AttendanceStatus") -> bool:
        """Check whether moving to ``target`` is a legal transition."""
        return target in self.allowed_transitions()

    @property
    def is_active(self) -> bool:
        """Active attendances count towards the one-per-event limit."""
        return self is not AttendanceStatus.CANCELLED

    @classmethod
    def parse(cls, value: "str | AttendanceStatus") -> "AttendanceStatus":
        """Parse a raw status string.

        Args:
            value: Status value (case-insensitive) or member.

        Returns:
            AttendanceStatus: Matching member.

        Raises:
            ValueError: If value is not a known status. There is no default.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for status in cls:
            if status.value == normalized:
                return status
        raise ValueError(f"Invalid attendance status: {value!r}")

    @classmethod
    def values(cls) -> list[str]:
        """Get all status values as strings.

        Returns:
            list[str]: List of status values.
        """
        return [status.value for status in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid status.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid status.
        """
        return value in cls.values()

    @classmethod
    def terminal_states(cls) -> list["AttendanceStatus"]:
        """Get terminal states (no outgoing transitions).

        Returns:
            list[AttendanceStatus]: Terminal states.
        """
        return [cls.CANCELLED]
