"""Revenue statistics query handlers.

Only COMPLETED payments contribute to revenue. Amounts are reported in a
single currency: the currency of the earliest completed payment in scope,
or the configured default when there is none.
"""

from datetime import UTC, datetime

from src.application.dtos.payment_dtos import PaymentStatsResult, RevenueResult
from src.application.queries.payment_queries import GetPaymentStats, GetTotalRevenue
from src.application.services.revenue_statistics import (
    average,
    completed_revenue,
    reporting_currency,
    revenue_by_period,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import validate_enum
from src.domain.enums.currency import Currency
from src.domain.enums.payment_status import PaymentStatus
from src.domain.enums.revenue_timeframe import RevenueTimeframe
from src.domain.protocols.payment_repository import PaymentFilter, PaymentRepository


class GetPaymentStatsHandler:
    """Handler for GetPaymentStats query."""

    def __init__(self, payment_repo: PaymentRepository, default_currency: Currency) -> None:
        self._payment_repo = payment_repo
        self._default_currency = default_currency

    async def handle(
        self, query: GetPaymentStats
    ) -> Result[PaymentStatsResult, DomainError]:
        """Handle GetPaymentStats query.

        Returns:
            Success(PaymentStatsResult): Statistics over the window.
            Failure(ValidationError): start_date after end_date.
        """
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

        payments = await self._payment_repo.find_with_filters(
            PaymentFilter(start_date=query.start_date, end_date=query.end_date)
        )

        by_status = {status.value: 0 for status in PaymentStatus}
        for payment in payments:
            by_status[payment.status.value] += 1

        currency = reporting_currency(payments, self._default_currency)
        total, count = completed_revenue(payments, currency)
        return Success(
            value=PaymentStatsResult(
                total_amount=total,
                total_count=count,
                payments_by_status=by_status,
                average_amount=average(total, count),
                revenue_by_period=revenue_by_period(payments, currency),
                currency=currency.value,
            )
        )


class GetTotalRevenueHandler:
    """Handler for GetTotalRevenue query."""

    def __init__(self, payment_repo: PaymentRepository, default_currency: Currency) -> None:
        self._payment_repo = payment_repo
        self._default_currency = default_currency

    async def handle(self, query: GetTotalRevenue) -> Result[RevenueResult, DomainError]:
        """Handle GetTotalRevenue query.

        Returns:
            Success(RevenueResult): Revenue in the window ending now.
            Failure(ValidationError): Unknown timeframe.
        """
        match validate_enum(query.timeframe, RevenueTimeframe, "timeframe"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=timeframe):
                pass

        start_date, end_date = timeframe.date_range(datetime.now(UTC))
        payments = await self._payment_repo.find_with_filters(
            PaymentFilter(
                status=PaymentStatus.COMPLETED,
                start_date=start_date,
                end_date=end_date,
            )
        )

        currency = reporting_currency(payments, self._default_currency)
        total, count = completed_revenue(payments, currency)
        return Success(
            value=RevenueResult(
                total=total,
                currency=currency.value,
                period=timeframe.value,
                start_date=start_date,
                end_date=end_date,
                transaction_count=count,
                average_amount=average(total, count),
                revenue_by_time_segment=revenue_by_period(
                    payments, currency, key=timeframe.segment_key
                ),
            )
        )
