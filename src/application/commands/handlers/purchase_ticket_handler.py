"""Purchase ticket handler: create a payment and process it in one step.

When processing fails the payment stays on record as FAILED; the returned
error carries its id under ``details["payment_id"]`` so the client can
refer to it.
"""

from dataclasses import replace

from src.application.commands.handlers.create_payment_handler import (
    CreatePaymentHandler,
)
from src.application.commands.handlers.process_payment_handler import (
    ProcessPaymentHandler,
)
from src.application.commands.payment_commands import ProcessPayment, PurchaseTicket
from src.application.dtos.payment_dtos import PaymentResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success


class PurchaseTicketHandler:
    """Handler for PurchaseTicket command."""

    def __init__(
        self,
        create_handler: CreatePaymentHandler,
        process_handler: ProcessPaymentHandler,
    ) -> None:
        self._create_handler = create_handler
        self._process_handler = process_handler

    async def handle(self, cmd: PurchaseTicket) -> Result[PaymentResult, DomainError]:
        match await self._create_handler.handle(cmd.to_create_command()):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=created):
                pass

        match await self._process_handler.handle(ProcessPayment(payment_id=created.id)):
            case Failure(error=error):
                details = {**(error.details or {}), "payment_id": str(created.id)}
                return Failure(error=replace(error, details=details))
            case Success(value=processed):
                return Success(value=processed)
