"""Offline payment processor (cash, bank transfer, other).

Money changes hands outside the platform: a cashier or accountant has
already confirmed it when the payment is processed. Processing succeeds
immediately with a generated reference; refunds and cancellations are
settled offline and only acknowledged here.
"""

from uuid_extensions import uuid7

from src.core.result import Result, Success
from src.domain.entities.payment import Payment
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.payment_processor_error import PaymentProcessorError
from src.domain.protocols.payment_processor_protocol import ProcessorReceipt


class OfflinePaymentProcessor:
    """PaymentProcessorProtocol implementation for one offline provider."""

    def __init__(self, provider: PaymentProvider) -> None:
        self._provider = provider

    @property
    def provider(self) -> PaymentProvider:
        return self._provider

    async def process_payment(
        self, payment: Payment
    ) -> Result[ProcessorReceipt, PaymentProcessorError]:
        return Success(
            value=ProcessorReceipt(
                provider_payment_id=payment.provider_payment_id
                or f"offline_{uuid7().hex}",
                status=PaymentStatus.COMPLETED,
                raw={"settlement": self._provider.value},
            )
        )

    async def refund_payment(
        self, payment: Payment, reason: str | None = None
    ) -> Result[ProcessorReceipt, PaymentProcessorError]:
        return Success(
            value=ProcessorReceipt(
                provider_payment_id=f"offline_refund_{uuid7().hex}",
                status=PaymentStatus.REFUNDED,
            )
        )

    async def check_payment_status(
        self, payment: Payment
    ) -> Result[PaymentStatus, PaymentProcessorError]:
        return Success(value=payment.status)

    async def cancel_payment(self, payment: Payment) -> Result[None, PaymentProcessorError]:
        return Success(value=None)
