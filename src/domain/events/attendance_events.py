"""Attendance domain events.

One event per successful state change of an attendance.

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class AttendanceRegistered(DomainEvent):
    """User registered for an event.

    Attributes:
        attendance_id: New attendance record.
        platform_event_id: Event registered for.
        user_id: Registered user.
    """

    attendance_id: UUID
    platform_event_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class AttendanceCheckedIn(DomainEvent):
    """User checked in at the event."""

    attendance_id: UUID
    platform_event_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class AttendanceCheckedOut(DomainEvent):
    """User checked out of the event."""

    attendance_id: UUID
    platform_event_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class AttendanceCancelled(DomainEvent):
    """Attendance was cancelled.

    Attributes:
        previous_status: Status before cancellation (registered,
            checked_in or checked_out).
    """

    attendance_id: UUID
    platform_event_id: UUID
    user_id: UUID
    previous_status: str


@dataclass(frozen=True, kw_only=True)
class AttendanceUpdated(DomainEvent):
    """Attendance was edited through the generic update operation.

    Attributes:
        previous_status: Status before the update.
        new_status: Status after the update.
        forced: True when the status was set by administrative override.
    """

    attendance_id: UUID
    platform_event_id: UUID
    user_id: UUID
    previous_status: str
    new_status: str
    forced: bool = False
