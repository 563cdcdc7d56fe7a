"""Payment handler result DTOs.

Money value objects are flattened into amount + currency for serialization.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from src.domain.entities.payment import Payment


@dataclass
class PaymentResult:
    """Single payment result."""

    id: UUID
    user_id: UUID
    event_id: UUID
    ticket_id: UUID | None
    amount: Decimal
    currency: str
    status: str
    provider: str
    provider_payment_id: str | None
    payment_method: str
    description: str | None
    metadata: dict[str, Any]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, payment: Payment) -> "PaymentResult":
        return cls(
            id=payment.id,
            user_id=payment.user_id,
            event_id=payment.event_id,
            ticket_id=payment.ticket_id,
            amount=payment.amount.amount,
            currency=payment.currency.value,
            status=payment.status.value,
            provider=payment.provider.value,
            provider_payment_id=payment.provider_payment_id,
            payment_method=payment.payment_method.value,
            description=payment.description,
            metadata=dict(payment.metadata),
            created_at=payment.created_at,
            updated_at=payment.updated_at,
        )


@dataclass
class PaymentStatusCheckResult:
    """Local status next to the status reported by the processor."""

    payment_id: UUID
    local_status: str
    remote_status: str

    @property
    def in_sync(self) -> bool:
        return self.local_status == self.remote_status


@dataclass
class PaymentStatsResult:
    """Payment statistics.

    Attributes:
        total_amount: Sum of completed payments in ``currency``.
        total_count: Number of completed payments in ``currency``.
        payments_by_status: Count of payments per status (all statuses).
        average_amount: total_amount / total_count (0 when no payment).
        revenue_by_period: ``YYYY-MM`` → revenue, ascending.
        currency: Currency the amounts are expressed in.
    """

    total_amount: Decimal
    total_count: int
    payments_by_status: dict[str, int]
    average_amount: Decimal
    revenue_by_period: dict[str, Decimal]
    currency: str


@dataclass
class RevenueResult:
    """Total revenue over a timeframe.

    Attributes:
        total: Sum of completed payments in the window.
        currency: Currency of the figures.
        period: Timeframe value (daily, weekly, monthly, yearly, all).
        start_date: Window start, None for all-time.
        end_date: Window end (query time).
        transaction_count: Number of completed payments in the window.
        average_amount: total / transaction_count (0 when none).
        revenue_by_time_segment: Segment key → revenue, ascending.
    """

    total: Decimal
    currency: str
    period: str
    start_date: datetime | None
    end_date: datetime
    transaction_count: int
    average_amount: Decimal
    revenue_by_time_segment: dict[str, Decimal] = field(default_factory=dict)
