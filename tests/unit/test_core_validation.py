"""Unit tests for core validation functions.

Tests cover:
- validate_required: None, empty string, whitespace
- validate_max_length: boundary cases
- validate_positive_amount: zero, negative, precision, non-numeric
- validate_decimal_places: per-currency precision, trailing zeros
- validate_enum: value, name, case, unknown values
- validate_pagination: page and limit bounds

Architecture:
- Pure functions, no mocking required
"""

from decimal import Decimal

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.core.validation import (
    MAX_TEXT_LENGTH,
    validate_decimal_places,
    validate_enum,
    validate_max_length,
    validate_pagination,
    validate_positive_amount,
    validate_required,
)
from src.domain.enums.attendance_status import AttendanceStatus
from src.domain.enums.payment_provider import PaymentProvider


@pytest.mark.unit
class TestValidateRequired:
    """Test validate_required."""

    def test_value_present(self):
        assert validate_required("evt", "event_id") == Success(value="evt")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_values(self, value):
        result = validate_required(value, "event_id")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.field == "event_id"
        assert "event_id" in result.error.message

    def test_falsy_non_string_is_present(self):
        assert isinstance(validate_required(0, "count"), Success)


@pytest.mark.unit
class TestValidateMaxLength:
    """Test validate_max_length."""

    def test_none_passes(self):
        assert validate_max_length(None, MAX_TEXT_LENGTH, "notes") == Success(value=None)

    def test_exactly_max_length(self):
        text = "n" * MAX_TEXT_LENGTH

        assert validate_max_length(text, MAX_TEXT_LENGTH, "notes") == Success(value=text)

    def test_one_over_max_length(self):
        result = validate_max_length("n" * (MAX_TEXT_LENGTH + 1), MAX_TEXT_LENGTH, "notes")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALUE_TOO_LONG
        assert result.error.field == "notes"


@pytest.mark.unit
class TestValidatePositiveAmount:
    """Test validate_positive_amount."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (Decimal("25.00"), Decimal("25.00")),
            ("0.01", Decimal("0.01")),
            (10, Decimal("10")),
            (19.99, Decimal("19.99")),
        ],
    )
    def test_valid_amounts(self, raw, expected):
        assert validate_positive_amount(raw) == Success(value=expected)

    @pytest.mark.parametrize("raw", ["0", "-5.00", Decimal("0.00")])
    def test_non_positive_amounts(self, raw):
        result = validate_positive_amount(raw)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_AMOUNT
        assert result.error.field == "amount"

    def test_more_than_two_decimals(self):
        result = validate_positive_amount("1.005")

        assert isinstance(result, Failure)
        assert "decimal" in result.error.message

    @pytest.mark.parametrize("raw", ["abc", "", "Infinity", "NaN"])
    def test_not_a_number(self, raw):
        result = validate_positive_amount(raw)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_AMOUNT

    def test_custom_field_name(self):
        result = validate_positive_amount("-1", "refund_amount")

        assert result.error.field == "refund_amount"


@pytest.mark.unit
class TestValidateDecimalPlaces:
    """Test validate_decimal_places."""

    @pytest.mark.parametrize(
        ("raw", "places"),
        [("10", 0), ("10.00", 0), ("1500.0", 0), ("10.5", 2), ("10.50", 2)],
    )
    def test_within_precision(self, raw, places):
        assert validate_decimal_places(Decimal(raw), places) == Success(value=Decimal(raw))

    @pytest.mark.parametrize(("raw", "places"), [("10.50", 0), ("0.5", 0), ("1.005", 2)])
    def test_too_precise(self, raw, places):
        result = validate_decimal_places(Decimal(raw), places)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_AMOUNT
        assert result.error.field == "amount"
        assert f"at most {places} decimal places" in result.error.message


@pytest.mark.unit
class TestValidateEnum:
    """Test validate_enum."""

    @pytest.mark.parametrize("raw", ["checked_in", "CHECKED_IN", " Checked_In "])
    def test_accepts_value_or_name(self, raw):
        assert validate_enum(raw, AttendanceStatus, "status") == Success(
            value=AttendanceStatus.CHECKED_IN
        )

    def test_accepts_member(self):
        result = validate_enum(PaymentProvider.STRIPE, PaymentProvider, "provider")

        assert result == Success(value=PaymentProvider.STRIPE)

    @pytest.mark.parametrize("raw", ["attending", "", None, 3])
    def test_rejects_unknown(self, raw):
        result = validate_enum(raw, AttendanceStatus, "status")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ENUM_VALUE
        assert result.error.field == "status"
        assert "registered" in result.error.message


@pytest.mark.unit
class TestValidatePagination:
    """Test validate_pagination."""

    def test_valid(self):
        assert validate_pagination(1, 20, 100) == Success(value=(1, 20))

    def test_limit_at_max(self):
        assert validate_pagination(3, 100, 100) == Success(value=(3, 100))

    @pytest.mark.parametrize("page", [0, -1])
    def test_invalid_page(self, page):
        result = validate_pagination(page, 20, 100)

        assert isinstance(result, Failure)
        assert result.error.field == "page"

    @pytest.mark.parametrize("limit", [0, 101])
    def test_invalid_limit(self, limit):
        result = validate_pagination(1, limit, 100)

        assert isinstance(result, Failure)
        assert result.error.field == "limit"
        assert result.error.code == ErrorCode.VALIDATION_FAILED
