"""Payment lookup query handlers.

CheckPaymentStatus asks the processor for the remote status and reports
it next to the local one without changing the payment.
"""

from src.application.dtos.payment_dtos import PaymentResult, PaymentStatusCheckResult
from src.application.errors.lifecycle_errors import payment_not_found, processor_call_failed
from src.application.queries.payment_queries import CheckPaymentStatus, GetPayment
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.payment_processor_protocol import (
    PaymentProcessorRegistryProtocol,
)
from src.domain.protocols.payment_repository import PaymentRepository


class GetPaymentHandler:
    """Handler for GetPayment query."""

    def __init__(self, payment_repo: PaymentRepository) -> None:
        self._payment_repo = payment_repo

    async def handle(self, query: GetPayment) -> Result[PaymentResult, DomainError]:
        payment = await self._payment_repo.find_by_id(query.payment_id)
        if payment is None:
            return Failure(error=payment_not_found(query.payment_id))
        return Success(value=PaymentResult.from_entity(payment))


class CheckPaymentStatusHandler:
    """Handler for CheckPaymentStatus query."""

    def __init__(
        self,
        payment_repo: PaymentRepository,
        processors: PaymentProcessorRegistryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._payment_repo = payment_repo
        self._processors = processors
        self._logger = logger

    async def handle(
        self, query: CheckPaymentStatus
    ) -> Result[PaymentStatusCheckResult, DomainError]:
        """Handle CheckPaymentStatus query.

        Returns:
            Success(PaymentStatusCheckResult): Local and remote status.
            Failure(NotFoundError): Payment does not exist.
            Failure(PaymentProcessorError): Processor unsupported or unreachable.
        """
        payment = await self._payment_repo.find_by_id(query.payment_id)
        if payment is None:
            return Failure(error=payment_not_found(query.payment_id))

        match self._processors.get(payment.provider):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=processor):
                pass

        try:
            remote = await processor.check_payment_status(payment)
        except Exception as e:
            self._logger.error(
                "Payment processor raised during status check",
                error=e,
                payment_id=str(payment.id),
            )
            return Failure(error=processor_call_failed(payment.provider.value, e))

        match remote:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=remote_status):
                return Success(
                    value=PaymentStatusCheckResult(
                        payment_id=payment.id,
                        local_status=payment.status.value,
                        remote_status=remote_status.value,
                    )
                )
