"""Base domain event class.

Domain events represent "things that happened" in the business domain and
are always named in past tense (e.g., AttendanceRegistered, PaymentRefunded).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUIDv7, time ordered) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    >>> class AttendanceRegistered(DomainEvent):
    ...     attendance_id: UUID
    ...     platform_event_id: UUID
    ...     user_id: UUID
    >>>
    >>> event = AttendanceRegistered(attendance_id=..., platform_event_id=..., user_id=...)
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (AttendanceCancelled, NOT CancelAttendance)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)

    Events are published AFTER the state change is persisted (facts, not
    intents).

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
