"""Payment processor protocol (port).

Processors talk to whoever moves the money (Stripe, a cashier, a bank).
Every method is asynchronous and may fail; failures are returned as
PaymentProcessorError values. Timeouts and cancellation of the remote call
are the processor's concern; callers only react to the resolved outcome.

Implementations:
    - StripePaymentProcessor: src/infrastructure/payments/stripe_processor.py
    - OfflinePaymentProcessor: src/infrastructure/payments/offline_processor.py
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

from src.core.result import Result
from src.domain.entities.payment import Payment
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.payment_processor_error import PaymentProcessorError


@dataclass(frozen=True, kw_only=True)
class ProcessorReceipt:
    """Outcome of a successful processor call.

    Attributes:
        provider_payment_id: Processor reference for the charge or refund.
        status: Status the processor reports for the payment.
        raw: Processor-specific data worth keeping in payment metadata.
    """

    provider_payment_id: str
    status: PaymentStatus
    raw: dict[str, Any] = field(default_factory=dict)


class PaymentProcessorProtocol(Protocol):
    """Capability interface of a payment processor."""

    @property
    def provider(self) -> PaymentProvider:
        """Provider this processor serves."""
        ...

    async def process_payment(
        self, payment: Payment
    ) -> Result[ProcessorReceipt, PaymentProcessorError]:
        """Charge the payer for a pending payment.

        Returns:
            Success(ProcessorReceipt) with status COMPLETED when the charge
            is confirmed, Failure(PaymentProcessorError) otherwise.
        """
        ...

    async def refund_payment(
        self, payment: Payment, reason: str | None = None
    ) -> Result[ProcessorReceipt, PaymentProcessorError]:
        """Return the full amount of a completed payment to the payer."""
        ...

    async def check_payment_status(
        self, payment: Payment
    ) -> Result[PaymentStatus, PaymentProcessorError]:
        """Ask the processor for the current remote status of a payment."""
        ...

    async def cancel_payment(
        self, payment: Payment
    ) -> Result[None, PaymentProcessorError]:
        """Void a charge that was started but not confirmed."""
        ...


class PaymentProcessorRegistryProtocol(Protocol):
    """Resolves the processor serving a provider."""

    def get(
        self, provider: PaymentProvider
    ) -> Result[PaymentProcessorProtocol, PaymentProcessorError]:
        """Return the processor for ``provider``.

        Returns:
            Failure(UnsupportedPaymentProviderError) when none is registered.
        """
        ...
