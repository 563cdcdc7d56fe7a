"""Domain events module.

Events decouple lifecycle state changes from cross-cutting concerns such as
logging.

Usage:
    >>> from src.domain.events import AttendanceRegistered
    >>>
    >>> await event_bus.publish(
    ...     AttendanceRegistered(
    ...         attendance_id=a.id, platform_event_id=a.event_id, user_id=a.user_id
    ...     )
    ... )
"""

from src.domain.events.attendance_events import (
    AttendanceCancelled,
    AttendanceCheckedIn,
    AttendanceCheckedOut,
    AttendanceRegistered,
    AttendanceUpdated,
)
from src.domain.events.base_event import DomainEvent
from src.domain.events.payment_events import (
    AttendanceRefundPartiallyFailed,
    PaymentCancelled,
    PaymentCompleted,
    PaymentCreated,
    PaymentFailed,
    PaymentRefunded,
)

__all__ = [
    "DomainEvent",
    # Attendance
    "AttendanceRegistered",
    "AttendanceCheckedIn",
    "AttendanceCheckedOut",
    "AttendanceCancelled",
    "AttendanceUpdated",
    # Payment
    "PaymentCreated",
    "PaymentCompleted",
    "PaymentFailed",
    "PaymentRefunded",
    "PaymentCancelled",
    "AttendanceRefundPartiallyFailed",
]
