"""Unit tests for the payment query handlers.

Tests cover:
- GetPaymentHandler / CheckPaymentStatusHandler
- List by user / event, filtered search with fail-closed enum parsing
- GetPaymentStatsHandler and GetTotalRevenueHandler (frozen clock)
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.application.queries.handlers.get_payment_handler import (
    CheckPaymentStatusHandler,
    GetPaymentHandler,
)
from src.application.queries.handlers.list_payments_handler import (
    ListEventPaymentsHandler,
    ListUserPaymentsHandler,
    SearchPaymentsHandler,
)
from src.application.queries.handlers.payment_stats_handler import (
    GetPaymentStatsHandler,
    GetTotalRevenueHandler,
)
from src.application.queries.payment_queries import (
    CheckPaymentStatus,
    GetPayment,
    GetPaymentStats,
    GetTotalRevenue,
    ListEventPayments,
    ListUserPayments,
    SearchPayments,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.enums.currency import Currency
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.payment_processor_error import UnsupportedPaymentProviderError
from src.infrastructure.payments.processor_registry import PaymentProcessorRegistry
from tests.conftest import create_payment
from tests.fakes import InMemoryPaymentRepository, StubPaymentProcessor

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=UTC)


# =============================================================================
# Lookup
# =============================================================================


@pytest.mark.unit
class TestGetPaymentHandler:
    """Test GetPaymentHandler."""

    @pytest.mark.asyncio
    async def test_returns_payment(self):
        payment = create_payment()
        handler = GetPaymentHandler(InMemoryPaymentRepository([payment]))

        result = await handler.handle(GetPayment(payment_id=payment.id))

        assert isinstance(result, Success)
        assert result.value.id == payment.id
        assert result.value.amount == Decimal("25.00")

    @pytest.mark.asyncio
    async def test_missing_payment_is_not_found(self):
        handler = GetPaymentHandler(InMemoryPaymentRepository())

        result = await handler.handle(GetPayment(payment_id=uuid7()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.PAYMENT_NOT_FOUND


@pytest.mark.unit
class TestCheckPaymentStatusHandler:
    """Test CheckPaymentStatusHandler."""

    @pytest.mark.asyncio
    async def test_reports_local_and_remote_status(self):
        payment = create_payment(
            provider=PaymentProvider.STRIPE, provider_payment_id="pi_1"
        )
        stripe = StubPaymentProcessor(
            PaymentProvider.STRIPE, status_result=Success(value=PaymentStatus.COMPLETED)
        )
        repo = InMemoryPaymentRepository([payment])
        handler = CheckPaymentStatusHandler(
            repo, PaymentProcessorRegistry([stripe]), MagicMock()
        )

        result = await handler.handle(CheckPaymentStatus(payment_id=payment.id))

        assert isinstance(result, Success)
        assert result.value.local_status == "pending"
        assert result.value.remote_status == "completed"
        assert result.value.in_sync is False
        assert repo.stored(payment.id).status == PaymentStatus.PENDING

    @pytest.mark.asyncio
    async def test_unsupported_provider(self):
        payment = create_payment(provider=PaymentProvider.MERCADO_PAGO)
        handler = CheckPaymentStatusHandler(
            InMemoryPaymentRepository([payment]), PaymentProcessorRegistry([]), MagicMock()
        )

        result = await handler.handle(CheckPaymentStatus(payment_id=payment.id))

        assert isinstance(result, Failure)
        assert isinstance(result.error, UnsupportedPaymentProviderError)

    @pytest.mark.asyncio
    async def test_processor_exception_is_processor_error(self):
        payment = create_payment(provider=PaymentProvider.STRIPE)
        stripe = StubPaymentProcessor(PaymentProvider.STRIPE, raises=OSError("reset"))
        mock_logger = MagicMock()
        handler = CheckPaymentStatusHandler(
            InMemoryPaymentRepository([payment]),
            PaymentProcessorRegistry([stripe]),
            mock_logger,
        )

        result = await handler.handle(CheckPaymentStatus(payment_id=payment.id))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PAYMENT_PROCESSOR_ERROR
        mock_logger.error.assert_called_once()


# =============================================================================
# Lists and search
# =============================================================================


@pytest.mark.unit
class TestListPaymentsHandlers:
    """Test list-by-user and list-by-event handlers."""

    @pytest.mark.asyncio
    async def test_list_user_payments_newest_first(self):
        user_id = uuid7()
        older = create_payment(user_id=user_id, created_at=NOW - timedelta(days=1))
        newer = create_payment(user_id=user_id, created_at=NOW)
        repo = InMemoryPaymentRepository([older, newer, create_payment()])

        result = await ListUserPaymentsHandler(repo).handle(ListUserPayments(user_id=user_id))

        assert [p.id for p in result.value.payments] == [newer.id, older.id]
        assert result.value.total_count == 2

    @pytest.mark.asyncio
    async def test_list_event_payments(self):
        event_id = uuid7()
        repo = InMemoryPaymentRepository([create_payment(event_id=event_id)])

        result = await ListEventPaymentsHandler(repo).handle(
            ListEventPayments(event_id=event_id)
        )

        assert result.value.total_count == 1


@pytest.mark.unit
class TestSearchPaymentsHandler:
    """Test SearchPaymentsHandler."""

    @pytest.fixture
    def repo(self):
        return InMemoryPaymentRepository(
            [
                create_payment(
                    amount="10.00",
                    status=PaymentStatus.COMPLETED,
                    provider=PaymentProvider.STRIPE,
                    payment_method=PaymentMethod.CREDIT_CARD,
                    created_at=NOW - timedelta(days=10),
                ),
                create_payment(amount="50.00", status=PaymentStatus.COMPLETED, created_at=NOW),
                create_payment(amount="75.00", status=PaymentStatus.FAILED, created_at=NOW),
            ]
        )

    @pytest.mark.asyncio
    async def test_filter_by_status_and_amount(self, repo):
        result = await SearchPaymentsHandler(repo).handle(
            SearchPayments(status="completed", min_amount=Decimal("20"))
        )

        assert isinstance(result, Success)
        assert [p.amount for p in result.value.payments] == [Decimal("50.00")]

    @pytest.mark.asyncio
    async def test_filter_by_provider_and_method(self, repo):
        result = await SearchPaymentsHandler(repo).handle(
            SearchPayments(provider="stripe", payment_method="credit_card")
        )

        assert result.value.total_count == 1

    @pytest.mark.asyncio
    async def test_filter_by_date_range(self, repo):
        result = await SearchPaymentsHandler(repo).handle(
            SearchPayments(start_date=NOW - timedelta(days=1), end_date=NOW)
        )

        assert result.value.total_count == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("field", "value"),
        [("status", "paid"), ("provider", "venmo"), ("payment_method", "barter")],
    )
    async def test_unknown_enum_values_rejected(self, repo, field, value):
        result = await SearchPaymentsHandler(repo).handle(SearchPayments(**{field: value}))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_ENUM_VALUE
        assert result.error.field == field

    @pytest.mark.asyncio
    async def test_inverted_amount_bounds_rejected(self, repo):
        result = await SearchPaymentsHandler(repo).handle(
            SearchPayments(min_amount=Decimal("100"), max_amount=Decimal("1"))
        )

        assert isinstance(result, Failure)
        assert result.error.field == "min_amount"

    @pytest.mark.asyncio
    async def test_inverted_date_range_rejected(self, repo):
        result = await SearchPaymentsHandler(repo).handle(
            SearchPayments(start_date=NOW, end_date=NOW - timedelta(days=1))
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_DATE_RANGE


# =============================================================================
# Statistics
# =============================================================================


@pytest.mark.unit
class TestGetPaymentStatsHandler:
    """Test GetPaymentStatsHandler."""

    @pytest.mark.asyncio
    async def test_stats_over_all_payments(self):
        repo = InMemoryPaymentRepository(
            [
                create_payment(
                    amount="10.00",
                    status=PaymentStatus.COMPLETED,
                    created_at=datetime(2026, 1, 5, tzinfo=UTC),
                ),
                create_payment(
                    amount="20.00",
                    status=PaymentStatus.COMPLETED,
                    created_at=datetime(2026, 2, 5, tzinfo=UTC),
                ),
                create_payment(
                    amount="5.00",
                    status=PaymentStatus.COMPLETED,
                    created_at=datetime(2026, 2, 6, tzinfo=UTC),
                ),
                create_payment(amount="99.00", status=PaymentStatus.REFUNDED),
                create_payment(amount="42.00", status=PaymentStatus.PENDING),
            ]
        )

        result = await GetPaymentStatsHandler(repo, Currency.USD).handle(GetPaymentStats())

        assert isinstance(result, Success)
        stats = result.value
        assert stats.total_amount == Decimal("35.00")
        assert stats.total_count == 3
        assert stats.average_amount == Decimal("11.67")
        assert stats.currency == "EUR"
        assert stats.payments_by_status == {
            "pending": 1,
            "completed": 3,
            "failed": 0,
            "refunded": 1,
            "cancelled": 0,
        }
        assert stats.revenue_by_period == {
            "2026-01": Decimal("10.00"),
            "2026-02": Decimal("25.00"),
        }

    @pytest.mark.asyncio
    async def test_stats_without_payments_use_default_currency(self):
        result = await GetPaymentStatsHandler(
            InMemoryPaymentRepository(), Currency.USD
        ).handle(GetPaymentStats())

        assert result.value.total_amount == Decimal("0")
        assert result.value.average_amount == Decimal("0")
        assert result.value.currency == "USD"
        assert result.value.revenue_by_period == {}

    @pytest.mark.asyncio
    async def test_stats_ignore_other_currencies(self):
        repo = InMemoryPaymentRepository(
            [
                create_payment(
                    amount="10.00",
                    status=PaymentStatus.COMPLETED,
                    currency=Currency.EUR,
                    created_at=NOW - timedelta(days=1),
                ),
                create_payment(
                    amount="500.00",
                    status=PaymentStatus.COMPLETED,
                    currency=Currency.MXN,
                    created_at=NOW,
                ),
            ]
        )

        result = await GetPaymentStatsHandler(repo, Currency.USD).handle(GetPaymentStats())

        assert result.value.currency == "EUR"
        assert result.value.total_amount == Decimal("10.00")

    @pytest.mark.asyncio
    async def test_inverted_window_rejected(self):
        result = await GetPaymentStatsHandler(
            InMemoryPaymentRepository(), Currency.EUR
        ).handle(GetPaymentStats(start_date=NOW, end_date=NOW - timedelta(days=1)))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_DATE_RANGE


@pytest.mark.unit
class TestGetTotalRevenueHandler:
    """Test GetTotalRevenueHandler with a frozen clock."""

    @pytest.fixture
    def repo(self):
        return InMemoryPaymentRepository(
            [
                create_payment(
                    amount="10.00", status=PaymentStatus.COMPLETED, created_at=NOW - timedelta(hours=2)
                ),
                create_payment(
                    amount="20.00", status=PaymentStatus.COMPLETED, created_at=NOW - timedelta(days=3)
                ),
                create_payment(
                    amount="40.00", status=PaymentStatus.COMPLETED, created_at=NOW - timedelta(days=40)
                ),
                create_payment(
                    amount="80.00",
                    status=PaymentStatus.COMPLETED,
                    created_at=NOW - timedelta(days=400),
                ),
                create_payment(amount="1000.00", status=PaymentStatus.PENDING, created_at=NOW),
            ]
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("timeframe", "total", "count", "start"),
        [
            ("daily", "10.00", 1, datetime(2026, 3, 15, tzinfo=UTC)),
            ("weekly", "30.00", 2, datetime(2026, 3, 8, 12, 0, tzinfo=UTC)),
            ("monthly", "30.00", 2, datetime(2026, 2, 15, 12, 0, tzinfo=UTC)),
            ("yearly", "70.00", 3, datetime(2025, 3, 15, 12, 0, tzinfo=UTC)),
            ("all", "150.00", 4, None),
        ],
    )
    async def test_revenue_per_timeframe(self, repo, timeframe, total, count, start):
        with freeze_time(NOW):
            result = await GetTotalRevenueHandler(repo, Currency.EUR).handle(
                GetTotalRevenue(timeframe=timeframe)
            )

        assert isinstance(result, Success)
        assert result.value.total == Decimal(total)
        assert result.value.transaction_count == count
        assert result.value.period == timeframe
        assert result.value.end_date == NOW
        assert result.value.start_date == start

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("timeframe", "total", "start"),
        [
            ("monthly", "5.00", datetime(2025, 12, 5, 12, 0, tzinfo=UTC)),
            ("yearly", "55.00", datetime(2025, 1, 5, 12, 0, tzinfo=UTC)),
        ],
    )
    async def test_windows_reach_into_previous_month_and_year(
        self, timeframe, total, start
    ):
        now = datetime(2026, 1, 5, 12, 0, tzinfo=UTC)
        repo = InMemoryPaymentRepository(
            [
                create_payment(
                    amount="5.00",
                    status=PaymentStatus.COMPLETED,
                    created_at=datetime(2025, 12, 20, tzinfo=UTC),
                ),
                create_payment(
                    amount="50.00",
                    status=PaymentStatus.COMPLETED,
                    created_at=datetime(2025, 12, 1, tzinfo=UTC),
                ),
                create_payment(
                    amount="500.00",
                    status=PaymentStatus.COMPLETED,
                    created_at=datetime(2024, 12, 31, tzinfo=UTC),
                ),
            ]
        )

        with freeze_time(now):
            result = await GetTotalRevenueHandler(repo, Currency.EUR).handle(
                GetTotalRevenue(timeframe=timeframe)
            )

        assert result.value.start_date == start
        assert result.value.total == Decimal(total)

    @pytest.mark.asyncio
    async def test_daily_breakdown_by_hour(self, repo):
        with freeze_time(NOW):
            result = await GetTotalRevenueHandler(repo, Currency.EUR).handle(
                GetTotalRevenue(timeframe="daily")
            )

        assert result.value.start_date == datetime(2026, 3, 15, tzinfo=UTC)
        assert result.value.revenue_by_time_segment == {"2026-03-15 10:00": Decimal("10.00")}
        assert result.value.average_amount == Decimal("10.00")

    @pytest.mark.asyncio
    async def test_all_time_has_no_start(self, repo):
        with freeze_time(NOW):
            result = await GetTotalRevenueHandler(repo, Currency.EUR).handle(GetTotalRevenue())

        assert result.value.start_date is None
        assert list(result.value.revenue_by_time_segment) == [
            "2025-02",
            "2026-02",
            "2026-03",
        ]

    @pytest.mark.asyncio
    async def test_unknown_timeframe_rejected(self, repo):
        result = await GetTotalRevenueHandler(repo, Currency.EUR).handle(
            GetTotalRevenue(timeframe="hourly")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ENUM_VALUE
        assert result.error.field == "timeframe"
