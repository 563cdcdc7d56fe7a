"""Unit tests for the lifecycle enums.

Tests cover:
- Attendance and payment transition tables
- Fail-closed parsing of raw strings
- Revenue timeframe windows and segment keys
"""

from datetime import UTC, datetime

import pytest

from src.domain.enums.attendance_status import AttendanceStatus
from src.domain.enums.currency import Currency
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.enums.revenue_timeframe import RevenueTimeframe


@pytest.mark.unit
class TestAttendanceStatus:
    """Test the attendance state machine table."""

    @pytest.mark.parametrize(
        ("source", "target", "allowed"),
        [
            (AttendanceStatus.REGISTERED, AttendanceStatus.CHECKED_IN, True),
            (AttendanceStatus.REGISTERED, AttendanceStatus.CHECKED_OUT, False),
            (AttendanceStatus.REGISTERED, AttendanceStatus.CANCELLED, True),
            (AttendanceStatus.CHECKED_IN, AttendanceStatus.CHECKED_OUT, True),
            (AttendanceStatus.CHECKED_IN, AttendanceStatus.REGISTERED, False),
            (AttendanceStatus.CHECKED_OUT, AttendanceStatus.CANCELLED, True),
            (AttendanceStatus.CHECKED_OUT, AttendanceStatus.CHECKED_IN, False),
            (AttendanceStatus.CANCELLED, AttendanceStatus.REGISTERED, False),
        ],
    )
    def test_can_transition_to(self, source, target, allowed):
        assert source.can_transition_to(target) is allowed

    def test_cancelled_is_terminal_and_inactive(self):
        assert AttendanceStatus.CANCELLED.allowed_transitions() == frozenset()
        assert AttendanceStatus.terminal_states() == [AttendanceStatus.CANCELLED]
        assert not AttendanceStatus.CANCELLED.is_active
        assert AttendanceStatus.CHECKED_OUT.is_active

    def test_parse_is_case_insensitive(self):
        assert AttendanceStatus.parse(" Checked_In ") is AttendanceStatus.CHECKED_IN

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Invalid attendance status"):
            AttendanceStatus.parse("attending")


@pytest.mark.unit
class TestPaymentStatus:
    """Test the payment state machine table."""

    def test_pending_transitions(self):
        assert PaymentStatus.PENDING.allowed_transitions() == frozenset(
            {PaymentStatus.COMPLETED, PaymentStatus.FAILED, PaymentStatus.CANCELLED}
        )

    def test_only_completed_can_be_refunded(self):
        refundable = [s for s in PaymentStatus if s.can_transition_to(PaymentStatus.REFUNDED)]

        assert refundable == [PaymentStatus.COMPLETED]

    @pytest.mark.parametrize(
        "status", [PaymentStatus.FAILED, PaymentStatus.REFUNDED, PaymentStatus.CANCELLED]
    )
    def test_terminal_states_have_no_transitions(self, status):
        assert status in PaymentStatus.terminal_states()
        assert status.allowed_transitions() == frozenset()

    def test_only_completed_counts_as_revenue(self):
        assert [s for s in PaymentStatus if s.counts_as_revenue] == [PaymentStatus.COMPLETED]

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Invalid payment status"):
            PaymentStatus.parse("paid")


@pytest.mark.unit
class TestPaymentEnumsParsing:
    """Test provider, method and currency parsing."""

    def test_provider_parse_accepts_value_and_name(self):
        assert PaymentProvider.parse("mercado_pago") is PaymentProvider.MERCADO_PAGO
        assert PaymentProvider.parse("STRIPE") is PaymentProvider.STRIPE

    def test_provider_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            PaymentProvider.parse("venmo")

    def test_offline_providers(self):
        assert PaymentProvider.offline_providers() == [
            PaymentProvider.CASH,
            PaymentProvider.BANK_TRANSFER,
            PaymentProvider.OTHER,
        ]

    def test_method_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            PaymentMethod.parse("barter")

    def test_currency_parse(self):
        assert Currency.parse("clp") is Currency.CLP
        assert Currency.CLP.minor_unit_exponent == 0
        assert Currency.USD.minor_unit_exponent == 2

    def test_currency_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Invalid currency code"):
            Currency.parse("GBP")


@pytest.mark.unit
class TestRevenueTimeframe:
    """Test timeframe windows."""

    NOW = datetime(2026, 5, 14, 15, 30, tzinfo=UTC)

    def test_daily_starts_at_midnight(self):
        start, end = RevenueTimeframe.DAILY.date_range(self.NOW)

        assert start == datetime(2026, 5, 14, tzinfo=UTC)
        assert end == self.NOW

    def test_weekly_rolls_back_seven_days(self):
        start, _ = RevenueTimeframe.WEEKLY.date_range(self.NOW)

        assert start == datetime(2026, 5, 7, 15, 30, tzinfo=UTC)

    def test_monthly_rolls_back_one_month(self):
        start, _ = RevenueTimeframe.MONTHLY.date_range(self.NOW)

        assert start == datetime(2026, 4, 14, 15, 30, tzinfo=UTC)

    def test_yearly_rolls_back_one_year(self):
        start, _ = RevenueTimeframe.YEARLY.date_range(self.NOW)

        assert start == datetime(2025, 5, 14, 15, 30, tzinfo=UTC)

    @pytest.mark.parametrize(
        ("now", "timeframe", "expected"),
        [
            (
                datetime(2026, 1, 5, 12, 0, tzinfo=UTC),
                RevenueTimeframe.MONTHLY,
                datetime(2025, 12, 5, 12, 0, tzinfo=UTC),
            ),
            (
                datetime(2026, 3, 31, 9, 0, tzinfo=UTC),
                RevenueTimeframe.MONTHLY,
                datetime(2026, 2, 28, 9, 0, tzinfo=UTC),
            ),
            (
                datetime(2028, 2, 29, 9, 0, tzinfo=UTC),
                RevenueTimeframe.YEARLY,
                datetime(2027, 2, 28, 9, 0, tzinfo=UTC),
            ),
        ],
    )
    def test_month_steps_cross_year_and_clamp_to_month_end(
        self, now, timeframe, expected
    ):
        start, _ = timeframe.date_range(now)

        assert start == expected

    def test_all_has_no_lower_bound(self):
        start, end = RevenueTimeframe.ALL.date_range(self.NOW)

        assert start is None
        assert end == self.NOW

    @pytest.mark.parametrize(
        ("timeframe", "expected"),
        [
            (RevenueTimeframe.DAILY, "2026-05-14 15:00"),
            (RevenueTimeframe.WEEKLY, "2026-05-14"),
            (RevenueTimeframe.MONTHLY, "2026-05-14"),
            (RevenueTimeframe.YEARLY, "2026-05"),
            (RevenueTimeframe.ALL, "2026-05"),
        ],
    )
    def test_segment_key(self, timeframe, expected):
        assert timeframe.segment_key(self.NOW) == expected

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Invalid revenue timeframe"):
            RevenueTimeframe.parse("hourly")
