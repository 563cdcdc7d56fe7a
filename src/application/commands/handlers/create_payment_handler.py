"""Create payment handler.

Flow:
1. Validate identifiers, amount, enum fields and description
2. Create PENDING payment
3. Persist
4. Publish PaymentCreated
5. Return PaymentResult

Enum fields are parsed fail-closed: an unknown currency, provider or
payment method is a ValidationError, never a silent default.
"""

from uuid_extensions import uuid7

from src.application.commands.payment_commands import CreatePayment
from src.application.dtos.payment_dtos import PaymentResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.core.validation import (
    MAX_TEXT_LENGTH,
    validate_decimal_places,
    validate_enum,
    validate_max_length,
    validate_positive_amount,
    validate_required,
)
from src.domain.entities.payment import Payment
from src.domain.enums.currency import Currency
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.events.payment_events import PaymentCreated
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.payment_repository import PaymentRepository
from src.domain.value_objects.money import Money


class CreatePaymentHandler:
    """Handler for CreatePayment command."""

    def __init__(
        self,
        payment_repo: PaymentRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            payment_repo: Payment repository for persistence.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._payment_repo = payment_repo
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: CreatePayment) -> Result[PaymentResult, DomainError]:
        """Handle create payment command.

        Returns:
            Success(PaymentResult): New PENDING payment.
            Failure(ValidationError): Invalid input.
        """
        for value, field_name in ((cmd.user_id, "user_id"), (cmd.event_id, "event_id")):
            match validate_required(value, field_name):
                case Failure(error=error):
                    return Failure(error=error)

        match validate_positive_amount(cmd.amount):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=amount):
                pass

        match validate_enum(cmd.currency, Currency, "currency"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=currency):
                pass

        match validate_decimal_places(amount, currency.minor_unit_exponent, "amount"):
            case Failure(error=error):
                return Failure(error=error)

        match validate_enum(cmd.provider, PaymentProvider, "provider"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=provider):
                pass

        match validate_enum(cmd.payment_method, PaymentMethod, "payment_method"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=payment_method):
                pass

        match validate_max_length(cmd.description, MAX_TEXT_LENGTH, "description"):
            case Failure(error=error):
                return Failure(error=error)

        assert cmd.user_id is not None and cmd.event_id is not None
        payment = Payment(
            id=uuid7(),
            user_id=cmd.user_id,
            event_id=cmd.event_id,
            amount=Money(amount, currency),
            provider=provider,
            payment_method=payment_method,
            ticket_id=cmd.ticket_id,
            description=cmd.description,
            metadata=dict(cmd.metadata),
        )
        await self._payment_repo.save(payment)

        self._logger.info(
            "Payment created",
            payment_id=str(payment.id),
            provider=provider.value,
            amount=str(payment.amount),
        )
        await self._event_bus.publish(
            PaymentCreated(
                payment_id=payment.id,
                user_id=payment.user_id,
                platform_event_id=payment.event_id,
                amount=payment.amount.amount,
                currency=payment.currency.value,
                provider=provider.value,
            )
        )
        return Success(value=PaymentResult.from_entity(payment))
