"""Cancel payment handler.

Abandons a PENDING payment. A charge already started at the processor
(payment carries a processor reference) is voided there first.
"""

from src.application.commands.payment_commands import CancelPayment
from src.application.dtos.payment_dtos import PaymentResult
from src.application.errors.lifecycle_errors import (
    invalid_payment_state,
    payment_concurrently_modified,
    payment_not_found,
    processor_call_failed,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.payment_error import PaymentError
from src.domain.events.payment_events import PaymentCancelled
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.payment_processor_protocol import (
    PaymentProcessorRegistryProtocol,
)
from src.domain.protocols.payment_repository import PaymentRepository


class CancelPaymentHandler:
    """Handler for CancelPayment command."""

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

    async def handle(self, cmd: CancelPayment) -> Result[PaymentResult, DomainError]:
        """Handle cancel payment command.

        Returns:
            Success(PaymentResult): CANCELLED payment.
            Failure(NotFoundError): Payment does not exist.
            Failure(InvalidStateError): Payment is not PENDING.
            Failure(PaymentProcessorError): Processor could not void the charge.
        """
        payment = await self._payment_repo.find_by_id(cmd.payment_id)
        if payment is None:
            return Failure(error=payment_not_found(cmd.payment_id))

        if payment.status != PaymentStatus.PENDING:
            return Failure(
                error=invalid_payment_state(
                    PaymentError.CANNOT_CANCEL, payment.status, "cancel"
                )
            )

        if payment.provider_payment_id:
            match self._processors.get(payment.provider):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=processor):
                    pass
            try:
                voided = await processor.cancel_payment(payment)
            except Exception as e:
                self._logger.error(
                    "Payment processor raised during cancellation",
                    error=e,
                    payment_id=str(payment.id),
                )
                return Failure(error=processor_call_failed(payment.provider.value, e))
            match voided:
                case Failure(error=error):
                    return Failure(error=error)

        payment.cancel()
        if not await self._payment_repo.save_transition(payment, PaymentStatus.PENDING):
            return Failure(error=payment_concurrently_modified(payment.id))

        self._logger.info("Payment cancelled", payment_id=str(payment.id))
        await self._event_bus.publish(
            PaymentCancelled(
                payment_id=payment.id,
                user_id=payment.user_id,
                platform_event_id=payment.event_id,
            )
        )
        return Success(value=PaymentResult.from_entity(payment))
