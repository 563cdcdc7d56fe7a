"""Payment domain events.

Pattern: one event per payment state change, plus a FAILED event for the
processing and cancellation-refund workflows.

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class PaymentCreated(DomainEvent):
    """Pending payment created."""

    payment_id: UUID
    user_id: UUID
    platform_event_id: UUID
    amount: Decimal
    currency: str
    provider: str


@dataclass(frozen=True, kw_only=True)
class PaymentCompleted(DomainEvent):
    """Processor confirmed the payment.

    Attributes:
        provider_payment_id: Processor reference for the charge.
    """

    payment_id: UUID
    user_id: UUID
    platform_event_id: UUID
    amount: Decimal
    currency: str
    provider_payment_id: str


@dataclass(frozen=True, kw_only=True)
class PaymentFailed(DomainEvent):
    """Processor rejected the payment or raised while processing.

    Attributes:
        reason: Processor error message.
    """

    payment_id: UUID
    user_id: UUID
    platform_event_id: UUID
    reason: str


@dataclass(frozen=True, kw_only=True)
class PaymentRefunded(DomainEvent):
    """Completed payment was refunded."""

    payment_id: UUID
    user_id: UUID
    platform_event_id: UUID
    amount: Decimal
    currency: str
    reason: str | None = None


@dataclass(frozen=True, kw_only=True)
class PaymentCancelled(DomainEvent):
    """Pending payment was abandoned."""

    payment_id: UUID
    user_id: UUID
    platform_event_id: UUID


@dataclass(frozen=True, kw_only=True)
class AttendanceRefundPartiallyFailed(DomainEvent):
    """Attendance was cancelled but some of its payments could not be refunded.

    Attributes:
        attendance_id: Cancelled attendance.
        refunded_payment_ids: Payments refunded successfully.
        failed_payment_ids: Payments whose refund failed.
    """

    attendance_id: UUID
    platform_event_id: UUID
    user_id: UUID
    refunded_payment_ids: tuple[UUID, ...] = field(default_factory=tuple)
    failed_payment_ids: tuple[UUID, ...] = field(default_factory=tuple)
