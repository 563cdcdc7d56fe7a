"""Unit tests for Money value object.

Tests cover:
- Money creation with validation
- Arithmetic and comparison between same-currency amounts
- CurrencyMismatchError handling
- Minor unit conversion (cents, zero-decimal currencies)
- Factory methods (zero, from_minor_units)
"""

from decimal import Decimal

import pytest

from src.domain.enums.currency import Currency
from src.domain.value_objects.money import CurrencyMismatchError, Money


# =============================================================================
# Test Fixtures and Helpers
# =============================================================================


def create_money(
    amount: str | Decimal = "100.00",
    currency: Currency | str = Currency.USD,
) -> Money:
    """Helper to create Money instances for testing."""
    if isinstance(amount, str):
        amount = Decimal(amount)
    return Money(amount, currency)


# =============================================================================
# Creation Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyCreation:
    """Test Money construction and normalization."""

    def test_money_created_with_decimal_and_currency(self):
        money = create_money("19.99", Currency.EUR)

        assert money.amount == Decimal("19.99")
        assert money.currency == Currency.EUR

    def test_money_parses_currency_code(self):
        """Raw currency codes are parsed case-insensitively."""
        money = create_money("10.00", "mxn")

        assert money.currency is Currency.MXN

    def test_money_accepts_integer_amount(self):
        money = Money(25, Currency.USD)  # type: ignore[arg-type]

        assert money.amount == Decimal("25")

    def test_money_rejects_unknown_currency(self):
        with pytest.raises(ValueError, match="Invalid currency code"):
            create_money("10.00", "XYZ")

    def test_money_rejects_nan_amount(self):
        with pytest.raises(ValueError, match="NaN or Infinite"):
            Money(Decimal("NaN"), Currency.USD)

    def test_money_rejects_infinity_amount(self):
        with pytest.raises(ValueError, match="NaN or Infinite"):
            Money(Decimal("Infinity"), Currency.USD)

    def test_money_rejects_non_numeric_amount(self):
        with pytest.raises(ValueError, match="valid number"):
            Money("abc", Currency.USD)  # type: ignore[arg-type]

    def test_money_is_frozen(self):
        money = create_money()

        with pytest.raises(AttributeError):
            money.amount = Decimal("1")  # type: ignore[misc]


# =============================================================================
# Arithmetic and Comparison Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyArithmetic:
    """Test arithmetic between Money values."""

    def test_add_same_currency(self):
        total = create_money("10.50") + create_money("4.50")

        assert total == create_money("15.00")

    def test_sub_same_currency(self):
        result = create_money("10.00") - create_money("2.50")

        assert result.amount == Decimal("7.50")

    def test_add_different_currency_raises_error(self):
        with pytest.raises(CurrencyMismatchError) as exc_info:
            create_money("1.00", Currency.USD) + create_money("1.00", Currency.EUR)

        assert exc_info.value.currency1 == Currency.USD
        assert exc_info.value.currency2 == Currency.EUR

    def test_currency_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            create_money("1.00", Currency.USD) - create_money("1.00", Currency.BRL)

    def test_add_non_money_returns_not_implemented(self):
        assert create_money().__add__(10) is NotImplemented  # type: ignore[arg-type]


@pytest.mark.unit
class TestMoneyComparison:
    """Test ordering between Money values."""

    def test_comparisons_same_currency(self):
        small = create_money("1.00")
        large = create_money("2.00")

        assert small < large
        assert small <= large
        assert large > small
        assert large >= small

    def test_comparison_different_currency_raises_error(self):
        with pytest.raises(CurrencyMismatchError):
            _ = create_money("1.00", Currency.USD) < create_money("2.00", Currency.COP)

    def test_equality_uses_amount_and_currency(self):
        assert create_money("5.00", Currency.USD) != create_money("5.00", Currency.EUR)
        assert create_money("5.00", Currency.USD) == create_money("5.00", Currency.USD)


# =============================================================================
# Query and Conversion Tests
# =============================================================================


@pytest.mark.unit
class TestMoneyQueries:
    """Test query helpers and minor unit conversion."""

    def test_is_positive_and_is_zero(self):
        assert create_money("0.01").is_positive()
        assert not create_money("0").is_positive()
        assert create_money("0").is_zero()

    def test_to_minor_units_uses_cents(self):
        assert create_money("19.99", Currency.USD).to_minor_units() == 1999

    def test_to_minor_units_rounds_half_up(self):
        assert create_money("0.005", Currency.EUR).to_minor_units() == 1

    def test_to_minor_units_zero_decimal_currency(self):
        """CLP has no minor unit."""
        assert create_money("1500", Currency.CLP).to_minor_units() == 1500

    def test_from_minor_units(self):
        money = Money.from_minor_units(2550, Currency.EUR)

        assert money.amount == Decimal("25.50")
        assert money.currency == Currency.EUR

    def test_zero_factory(self):
        zero = Money.zero(Currency.PEN)

        assert zero.is_zero()
        assert zero.currency == Currency.PEN

    def test_str_shows_two_decimals_and_code(self):
        assert str(create_money("5", Currency.UYU)) == "5.00 UYU"
