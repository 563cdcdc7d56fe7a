"""Payment domain entity.

A monetary transaction tied to a user, an event and (logically) a ticket.
Enforces the payment state machine; the processor call itself lives in
the application layer.

Usage:
    payment = Payment(
        id=uuid7(),
        user_id=user_id,
        event_id=event_id,
        amount=Money(Decimal("25.00"), Currency.EUR),
        provider=PaymentProvider.STRIPE,
    )

    match payment.complete("pi_123"):
        case Success(_):
            ...
        case Failure(error):
            ...
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from src.core.result import Failure, Result, Success
from src.domain.enums.currency import Currency
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.payment_error import PaymentError
from src.domain.value_objects.money import Money

MAX_DESCRIPTION_LENGTH = 500


@dataclass
class Payment:
    """Payment entity.

    State Machine:
        PENDING → COMPLETED | FAILED | CANCELLED
        COMPLETED → REFUNDED

    Attributes:
        id: Unique payment identifier.
        user_id: Paying user.
        event_id: Event the payment is for.
        amount: Positive amount with currency.
        provider: Provider that moves the money.
        payment_method: Instrument used by the payer.
        status: Current lifecycle state.
        ticket_id: Purchased ticket, when known.
        provider_payment_id: Processor reference, set on confirmation.
        description: Optional description (max 500 characters).
        metadata: Open key-value bag (errors, refund reason, processor data).
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    user_id: UUID
    event_id: UUID
    amount: Money
    provider: PaymentProvider
    payment_method: PaymentMethod = PaymentMethod.UNKNOWN
    status: PaymentStatus = PaymentStatus.PENDING
    ticket_id: UUID | None = None
    provider_payment_id: str | None = None
    description: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate payment after initialization.

        Raises:
            ValueError: If the amount is not positive or the description
                is too long.
        """
        if not self.amount.is_positive():
            raise ValueError(PaymentError.INVALID_AMOUNT)

        if self.description is not None and len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise ValueError(PaymentError.DESCRIPTION_TOO_LONG)

    @property
    def currency(self) -> Currency:
        return self.amount.currency

    def is_terminal(self) -> bool:
        return self.status in PaymentStatus.terminal_states()

    def is_refundable(self) -> bool:
        return self.status == PaymentStatus.COMPLETED

    # -------------------------------------------------------------------------
    # State Transition Methods (Return Result)
    # -------------------------------------------------------------------------

    def complete(self, provider_payment_id: str) -> Result[None, str]:
        """Transition PENDING → COMPLETED after processor confirmation.

        Args:
            provider_payment_id: Processor reference for the charge.

        Returns:
            Success(None): Transition successful.
            Failure(error): Not PENDING, or reference missing.
        """
        if not provider_payment_id:
            return Failure(error=PaymentError.PROVIDER_PAYMENT_ID_REQUIRED)

        if not self.status.can_transition_to(PaymentStatus.COMPLETED):
            return Failure(error=PaymentError.CANNOT_COMPLETE)

        self.status = PaymentStatus.COMPLETED
        self.provider_payment_id = provider_payment_id
        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def fail(self, error_message: str, error_code: str | None = None) -> Result[None, str]:
        """Transition PENDING → FAILED, recording the processor error.

        Side Effects (on success):
            - Sets status to FAILED
            - Stores {"message", "code", "failed_at"} under metadata["error"]
        """
        if not self.status.can_transition_to(PaymentStatus.FAILED):
            return Failure(error=PaymentError.CANNOT_FAIL)

        now = datetime.now(UTC)
        self.status = PaymentStatus.FAILED
        self.metadata = {
            **self.metadata,
            "error": {
                "message": error_message,
                "code": error_code,
                "failed_at": now.isoformat(),
            },
        }
        self.updated_at = now
        return Success(value=None)

    def refund(self, reason: str | None = None) -> Result[None, str]:
        """Transition COMPLETED → REFUNDED.

        Returns:
            Success(None): Transition successful.
            Failure(ALREADY_REFUNDED): Payment was refunded before.
            Failure(ONLY_COMPLETED_REFUNDABLE): Any other non-completed state.

        Side Effects (on success):
            - Sets status to REFUNDED
            - Stores refund_reason and refunded_at in metadata
        """
        if self.status == PaymentStatus.REFUNDED:
            return Failure(error=PaymentError.ALREADY_REFUNDED)

        if not self.status.can_transition_to(PaymentStatus.REFUNDED):
            return Failure(error=PaymentError.ONLY_COMPLETED_REFUNDABLE)

        now = datetime.now(UTC)
        self.status = PaymentStatus.REFUNDED
        self.metadata = {
            **self.metadata,
            "refund_reason": reason,
            "refunded_at": now.isoformat(),
        }
        self.updated_at = now
        return Success(value=None)

    def cancel(self) -> Result[None, str]:
        """Transition PENDING → CANCELLED (purchase abandoned)."""
        if not self.status.can_transition_to(PaymentStatus.CANCELLED):
            return Failure(error=PaymentError.CANNOT_CANCEL)

        now = datetime.now(UTC)
        self.status = PaymentStatus.CANCELLED
        self.metadata = {**self.metadata, "cancelled_at": now.isoformat()}
        self.updated_at = now
        return Success(value=None)

    def update_metadata(self, values: dict[str, Any]) -> None:
        """Merge ``values`` into metadata."""
        self.metadata = {**self.metadata, **values}
        self.updated_at = datetime.now(UTC)

    def attach_provider_reference(self, provider_payment_id: str) -> None:
        """Record the processor reference of a charge still awaiting confirmation."""
        self.provider_payment_id = provider_payment_id
        self.updated_at = datetime.now(UTC)
