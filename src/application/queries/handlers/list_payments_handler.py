"""Payment list query handlers.

Handles listing payments by user, by event, and filtered search.
"""

from dataclasses import dataclass, field

from src.application.dtos.payment_dtos import PaymentResult
from src.application.queries.payment_queries import (
    ListEventPayments,
    ListUserPayments,
    SearchPayments,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import validate_enum
from src.domain.entities.payment import Payment
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.protocols.payment_repository import PaymentFilter, PaymentRepository


@dataclass
class PaymentListResult:
    """List of payments.

    Attributes:
        payments: Payment DTOs.
        total_count: Number of payments returned.
    """

    payments: list[PaymentResult] = field(default_factory=list)
    total_count: int = 0

    @classmethod
    def from_entities(cls, payments: list[Payment]) -> "PaymentListResult":
        return cls(
            payments=[PaymentResult.from_entity(p) for p in payments],
            total_count=len(payments),
        )


class ListUserPaymentsHandler:
    """Handler for ListUserPayments query."""

    def __init__(self, payment_repo: PaymentRepository) -> None:
        self._payment_repo = payment_repo

    async def handle(
        self, query: ListUserPayments
    ) -> Result[PaymentListResult, DomainError]:
        payments = await self._payment_repo.find_by_user_id(query.user_id)
        return Success(value=PaymentListResult.from_entities(payments))


class ListEventPaymentsHandler:
    """Handler for ListEventPayments query."""

    def __init__(self, payment_repo: PaymentRepository) -> None:
        self._payment_repo = payment_repo

    async def handle(
        self, query: ListEventPayments
    ) -> Result[PaymentListResult, DomainError]:
        payments = await self._payment_repo.find_by_event_id(query.event_id)
        return Success(value=PaymentListResult.from_entities(payments))


class SearchPaymentsHandler:
    """Handler for SearchPayments query.

    Unknown status, provider or payment method values are rejected rather
    than ignored, so a typo never widens the result set.
    """

    def __init__(self, payment_repo: PaymentRepository) -> None:
        self._payment_repo = payment_repo

    async def handle(
        self, query: SearchPayments
    ) -> Result[PaymentListResult, DomainError]:
        """Handle SearchPayments query.

        Returns:
            Success(PaymentListResult): Matching payments, newest first.
            Failure(ValidationError): Unknown enum value or inverted bounds.
        """
        match self._build_filter(query):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=filters):
                pass

        payments = await self._payment_repo.find_with_filters(filters)
        return Success(value=PaymentListResult.from_entities(payments))

    def _build_filter(
        self, query: SearchPayments
    ) -> Result[PaymentFilter, ValidationError]:
        status = provider = payment_method = None
        if query.status is not None:
            match validate_enum(query.status, PaymentStatus, "status"):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=status):
                    pass
        if query.provider is not None:
            match validate_enum(query.provider, PaymentProvider, "provider"):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=provider):
                    pass
        if query.payment_method is not None:
            match validate_enum(query.payment_method, PaymentMethod, "payment_method"):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=payment_method):
                    pass

        if (
            query.min_amount is not None
            and query.max_amount is not None
            and query.min_amount > query.max_amount
        ):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="min_amount cannot exceed max_amount",
                    field="min_amount",
                )
            )
        if (
            query.start_date is not None
            and query.end_date is not None
            and query.start_date > query.end_date
        ):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_DATE_RANGE,
                    message="start_date cannot be after end_date",
                    field="start_date",
                )
            )

        return Success(
            value=PaymentFilter(
                user_id=query.user_id,
                event_id=query.event_id,
                status=status,
                provider=provider,
                payment_method=payment_method,
                min_amount=query.min_amount,
                max_amount=query.max_amount,
                start_date=query.start_date,
                end_date=query.end_date,
            )
        )
