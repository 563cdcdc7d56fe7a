"""Refund payment handler.

Only COMPLETED payments are refundable. When the payment carries a
processor reference the processor is asked to return the money first; if
it refuses, the payment stays COMPLETED and the processor error is
returned.
"""

from src.application.commands.payment_commands import RefundPayment
from src.application.dtos.payment_dtos import PaymentResult
from src.application.errors.lifecycle_errors import (
    payment_concurrently_modified,
    payment_not_found,
    payment_not_refundable,
    processor_call_failed,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.payment import Payment
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.payment_processor_error import PaymentProcessorError
from src.domain.events.payment_events import PaymentRefunded
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.payment_processor_protocol import (
    PaymentProcessorRegistryProtocol,
    ProcessorReceipt,
)
from src.domain.protocols.payment_repository import PaymentRepository


class RefundPaymentHandler:
    """Handler for RefundPayment command."""

    def __init__(
        self,
        payment_repo: PaymentRepository,
        processors: PaymentProcessorRegistryProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._payment_repo = payment_repo
        self._processors = processors
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: RefundPayment) -> Result[PaymentResult, DomainError]:
        """Handle refund payment command.

        Returns:
            Success(PaymentResult): REFUNDED payment.
            Failure(NotFoundError): Payment does not exist.
            Failure(ValidationError): Already refunded, or not completed.
            Failure(PaymentProcessorError): Processor refused; payment unchanged.
            Failure(ConflictError): Payment changed concurrently.
        """
        payment = await self._payment_repo.find_by_id(cmd.payment_id)
        if payment is None:
            return Failure(error=payment_not_found(cmd.payment_id))

        if not payment.is_refundable():
            return Failure(error=payment_not_refundable(payment.status))

        receipt: ProcessorReceipt | None = None
        if payment.provider_payment_id:
            match await self._refund_remotely(payment, cmd.reason):
                case Failure(error=error):
                    self._logger.warning(
                        "Processor refused refund",
                        payment_id=str(payment.id),
                        provider=error.provider_name,
                        error_code=error.code.value,
                    )
                    return Failure(error=error)
                case Success(value=receipt):
                    pass

        payment.refund(cmd.reason)
        if receipt is not None:
            payment.update_metadata({"refund_id": receipt.provider_payment_id})

        if not await self._payment_repo.save_transition(
            payment, PaymentStatus.COMPLETED
        ):
            return Failure(error=payment_concurrently_modified(payment.id))

        self._logger.info(
            "Payment refunded",
            payment_id=str(payment.id),
            amount=str(payment.amount),
        )
        await self._event_bus.publish(
            PaymentRefunded(
                payment_id=payment.id,
                user_id=payment.user_id,
                platform_event_id=payment.event_id,
                amount=payment.amount.amount,
                currency=payment.currency.value,
                reason=cmd.reason,
            )
        )
        return Success(value=PaymentResult.from_entity(payment))

    async def _refund_remotely(
        self, payment: Payment, reason: str | None
    ) -> Result[ProcessorReceipt, PaymentProcessorError]:
        match self._processors.get(payment.provider):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=processor):
                pass
        try:
            return await processor.refund_payment(payment, reason)
        except Exception as e:
            self._logger.error(
                "Payment processor raised during refund",
                error=e,
                payment_id=str(payment.id),
            )
            return Failure(error=processor_call_failed(payment.provider.value, e))
