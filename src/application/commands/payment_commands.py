"""Payment commands (CQRS write operations).

Enum-valued fields (currency, provider, payment_method) arrive as raw
strings and are parsed fail-closed by the handlers.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreatePayment:
    """Create a pending payment.

    Attributes:
        user_id: Paying user.
        event_id: Event paid for.
        amount: Positive amount (at most two decimals).
        currency: Currency code (e.g. "EUR").
        provider: Provider value (e.g. "stripe", "cash").
        payment_method: Payment method value, "unknown" when not known.
        ticket_id: Purchased ticket, when known.
        description: Optional description (max 500 characters).
        metadata: Extra key-value data stored with the payment.
    """

    user_id: UUID | None
    event_id: UUID | None
    amount: Decimal | int | float | str
    currency: str
    provider: str
    payment_method: str = "unknown"
    ticket_id: UUID | None = None
    description: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class ProcessPayment:
    """Charge a pending payment through its provider's processor."""

    payment_id: UUID


@dataclass(frozen=True, kw_only=True)
class PurchaseTicket:
    """Create a payment and immediately process it.

    Same fields as CreatePayment.
    """

    user_id: UUID | None
    event_id: UUID | None
    amount: Decimal | int | float | str
    currency: str
    provider: str
    payment_method: str = "unknown"
    ticket_id: UUID | None = None
    description: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_create_command(self) -> CreatePayment:
        return CreatePayment(
            user_id=self.user_id,
            event_id=self.event_id,
            amount=self.amount,
            currency=self.currency,
            provider=self.provider,
            payment_method=self.payment_method,
            ticket_id=self.ticket_id,
            description=self.description,
            metadata=self.metadata,
        )


@dataclass(frozen=True, kw_only=True)
class RefundPayment:
    """Refund a completed payment.

    Attributes:
        payment_id: Payment to refund.
        reason: Reason stored in the payment metadata.
    """

    payment_id: UUID
    reason: str | None = None


@dataclass(frozen=True, kw_only=True)
class CancelPayment:
    """Abandon a pending payment."""

    payment_id: UUID
