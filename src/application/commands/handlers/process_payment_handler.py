"""Process payment handler.

Flow:
1. Load payment, require PENDING
2. Resolve the processor for the payment's provider
3. Charge through the processor
4. COMPLETED on confirmation; FAILED on processor failure or exception;
   still PENDING (reference attached) when the processor has not settled
5. Publish PaymentCompleted or PaymentFailed

On failure the payment is marked FAILED and the ORIGINAL processor error is
returned, even when persisting the FAILED status itself raises. There are
no automatic retries.
"""

from src.application.commands.payment_commands import ProcessPayment
from src.application.dtos.payment_dtos import PaymentResult
from src.application.errors.lifecycle_errors import (
    invalid_payment_state,
    payment_concurrently_modified,
    payment_not_found,
    processor_call_failed,
    processor_reported_failure,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.payment import Payment
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.payment_error import PaymentError
from src.domain.errors.payment_processor_error import PaymentProcessorError
from src.domain.events.payment_events import PaymentCompleted, PaymentFailed
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.payment_processor_protocol import (
    PaymentProcessorRegistryProtocol,
    ProcessorReceipt,
)
from src.domain.protocols.payment_repository import PaymentRepository


class ProcessPaymentHandler:
    """Handler for ProcessPayment command."""

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

    async def handle(self, cmd: ProcessPayment) -> Result[PaymentResult, DomainError]:
        """Handle process payment command.

        Returns:
            Success(PaymentResult): Payment COMPLETED, or still PENDING when
                the processor has not settled yet.
            Failure(NotFoundError): Payment does not exist.
            Failure(InvalidStateError): Payment is not PENDING.
            Failure(PaymentProcessorError): Processor failed; payment is FAILED.
            Failure(ConflictError): Payment changed concurrently.
        """
        payment = await self._payment_repo.find_by_id(cmd.payment_id)
        if payment is None:
            return Failure(error=payment_not_found(cmd.payment_id))

        if payment.status != PaymentStatus.PENDING:
            return Failure(
                error=invalid_payment_state(
                    PaymentError.CANNOT_PROCESS, payment.status, "process"
                )
            )

        match self._processors.get(payment.provider):
            case Failure(error=error):
                return await self._record_failure(payment, error)
            case Success(value=processor):
                pass

        try:
            result = await processor.process_payment(payment)
        except Exception as e:
            self._logger.error(
                "Payment processor raised",
                error=e,
                payment_id=str(payment.id),
                provider=payment.provider.value,
            )
            return await self._record_failure(
                payment, processor_call_failed(payment.provider.value, e)
            )

        match result:
            case Failure(error=error):
                return await self._record_failure(payment, error)
            case Success(value=receipt):
                return await self._apply_receipt(payment, receipt)

    async def _apply_receipt(
        self, payment: Payment, receipt: ProcessorReceipt
    ) -> Result[PaymentResult, DomainError]:
        match receipt.status:
            case PaymentStatus.COMPLETED:
                pass
            case PaymentStatus.FAILED | PaymentStatus.CANCELLED:
                return await self._record_failure(
                    payment,
                    processor_reported_failure(
                        payment.provider.value, receipt.provider_payment_id
                    ),
                )
            case _:
                payment.attach_provider_reference(receipt.provider_payment_id)
                if receipt.raw:
                    payment.update_metadata({"processor": receipt.raw})
                await self._payment_repo.save(payment)
                self._logger.info(
                    "Payment awaiting processor confirmation",
                    payment_id=str(payment.id),
                    provider_payment_id=receipt.provider_payment_id,
                )
                return Success(value=PaymentResult.from_entity(payment))

        match payment.complete(receipt.provider_payment_id):
            case Failure(error=message):
                return await self._record_failure(
                    payment,
                    processor_reported_failure(
                        payment.provider.value, receipt.provider_payment_id, message
                    ),
                )
        if receipt.raw:
            payment.update_metadata({"processor": receipt.raw})

        if not await self._payment_repo.save_transition(payment, PaymentStatus.PENDING):
            return Failure(error=payment_concurrently_modified(payment.id))

        self._logger.info(
            "Payment completed",
            payment_id=str(payment.id),
            provider_payment_id=receipt.provider_payment_id,
        )
        await self._event_bus.publish(
            PaymentCompleted(
                payment_id=payment.id,
                user_id=payment.user_id,
                platform_event_id=payment.event_id,
                amount=payment.amount.amount,
                currency=payment.currency.value,
                provider_payment_id=receipt.provider_payment_id,
            )
        )
        return Success(value=PaymentResult.from_entity(payment))

    async def _record_failure(
        self, payment: Payment, error: PaymentProcessorError
    ) -> Result[PaymentResult, DomainError]:
        """Mark the payment FAILED and return the processor error unchanged."""
        self._logger.warning(
            "Payment processing failed",
            payment_id=str(payment.id),
            provider=error.provider_name,
            error_code=error.code.value,
        )
        try:
            payment.fail(error.message, error.code.value)
            if not await self._payment_repo.save_transition(
                payment, PaymentStatus.PENDING
            ):
                self._logger.warning(
                    "Failed payment status not persisted: concurrently modified",
                    payment_id=str(payment.id),
                )
        except Exception as e:
            self._logger.error(
                "Could not persist failed payment status",
                error=e,
                payment_id=str(payment.id),
            )

        await self._event_bus.publish(
            PaymentFailed(
                payment_id=payment.id,
                user_id=payment.user_id,
                platform_event_id=payment.event_id,
                reason=error.message,
            )
        )
        return Failure(error=error)
