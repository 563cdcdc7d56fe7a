"""Domain Events Registry - Single Source of Truth.

This registry catalogs ALL domain events in the system with their metadata.
Used for:
- Container wiring (automated subscription)
- Validation tests (verify every event has a logging handler)

Adding new events:
1. Define event dataclass in attendance_events.py or payment_events.py
2. Add entry to EVENT_REGISTRY below
3. Implement LoggingEventHandler.handle_{workflow_name}_{phase}
"""

from dataclasses import dataclass
from enum import Enum
from typing import Type

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


class EventCategory(Enum):
    """Event categories for organization and filtering."""

    ATTENDANCE = "attendance"
    PAYMENT = "payment"


class WorkflowPhase(Enum):
    """Outcome phase of the workflow that produced the event."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        category: Event category.
        workflow_name: Name of workflow (e.g., "attendance_registration").
        phase: Workflow phase (succeeded/failed).
        requires_logging: LoggingEventHandler handles this event.
    """

    event_class: Type[DomainEvent]
    category: EventCategory
    workflow_name: str
    phase: WorkflowPhase
    requires_logging: bool = True

    @property
    def handler_method_name(self) -> str:
        """Handler method expected on every subscribed handler."""
        return f"handle_{self.workflow_name}_{self.phase.value}"


# ═══════════════════════════════════════════════════════════════
# EVENT REGISTRY - Single Source of Truth
# ═══════════════════════════════════════════════════════════════

EVENT_REGISTRY: list[EventMetadata] = [
    # Attendance lifecycle
    EventMetadata(
        event_class=AttendanceRegistered,
        category=EventCategory.ATTENDANCE,
        workflow_name="attendance_registration",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    EventMetadata(
        event_class=AttendanceCheckedIn,
        category=EventCategory.ATTENDANCE,
        workflow_name="attendance_check_in",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    EventMetadata(
        event_class=AttendanceCheckedOut,
        category=EventCategory.ATTENDANCE,
        workflow_name="attendance_check_out",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    EventMetadata(
        event_class=AttendanceCancelled,
        category=EventCategory.ATTENDANCE,
        workflow_name="attendance_cancellation",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    EventMetadata(
        event_class=AttendanceUpdated,
        category=EventCategory.ATTENDANCE,
        workflow_name="attendance_update",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    # Payment lifecycle
    EventMetadata(
        event_class=PaymentCreated,
        category=EventCategory.PAYMENT,
        workflow_name="payment_creation",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    EventMetadata(
        event_class=PaymentCompleted,
        category=EventCategory.PAYMENT,
        workflow_name="payment_processing",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    EventMetadata(
        event_class=PaymentFailed,
        category=EventCategory.PAYMENT,
        workflow_name="payment_processing",
        phase=WorkflowPhase.FAILED,
    ),
    EventMetadata(
        event_class=PaymentRefunded,
        category=EventCategory.PAYMENT,
        workflow_name="payment_refund",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    EventMetadata(
        event_class=PaymentCancelled,
        category=EventCategory.PAYMENT,
        workflow_name="payment_cancellation",
        phase=WorkflowPhase.SUCCEEDED,
    ),
    # Cross-entity orchestration
    EventMetadata(
        event_class=AttendanceRefundPartiallyFailed,
        category=EventCategory.PAYMENT,
        workflow_name="attendance_refund",
        phase=WorkflowPhase.FAILED,
    ),
]


def get_all_events() -> list[Type[DomainEvent]]:
    """Get all registered event classes."""
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_events_requiring_logging() -> list[Type[DomainEvent]]:
    """Get events that LoggingEventHandler must handle."""
    return [meta.event_class for meta in EVENT_REGISTRY if meta.requires_logging]
