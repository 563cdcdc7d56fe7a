"""Validation framework for command input.

This module provides utility functions for common validation patterns.
All validation functions return Result types for consistent error handling,
so handlers can reject malformed commands before touching a repository.

Usage:
    from src.core.validation import validate_required, validate_max_length
    from src.core.result import Success, Failure

    result = validate_max_length(cmd.notes, 500, "notes")
    match result:
        case Success(notes):
            pass
        case Failure(error):
            print(error.message)
"""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, TypeVar

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

E = TypeVar("E", bound=Enum)

MAX_TEXT_LENGTH = 500


def validate_required(value: Any, field_name: str) -> Result[Any, ValidationError]:
    """Validate that a value is present.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if present, Failure with ValidationError otherwise.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"{field_name} is required",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_max_length(
    value: str | None, max_length: int, field_name: str
) -> Result[str | None, ValidationError]:
    """Validate maximum string length. None passes through.

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if value is not None and len(value) > max_length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALUE_TOO_LONG,
                message=f"{field_name} must be at most {max_length} characters",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_positive_amount(
    value: Decimal | int | float | str, field_name: str = "amount"
) -> Result[Decimal, ValidationError]:
    """Validate a monetary amount: finite, > 0, at most two decimal places.

    Floats are converted through ``str`` to avoid binary artefacts.

    Returns:
        Success with the amount as Decimal, Failure with ValidationError otherwise.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_AMOUNT,
                message=f"{field_name} is not a valid number",
                field=field_name,
            )
        )

    if not amount.is_finite() or amount <= 0:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_AMOUNT,
                message=f"{field_name} must be greater than zero",
                field=field_name,
            )
        )

    return validate_decimal_places(amount, 2, field_name)


def validate_decimal_places(
    amount: Decimal, places: int, field_name: str = "amount"
) -> Result[Decimal, ValidationError]:
    """Reject amounts with more significant decimal places than ``places``.

    Trailing zeros do not count: ``Decimal("10.00")`` passes with zero places.

    Returns:
        Success with the amount, Failure with ValidationError otherwise.
    """
    exponent = amount.normalize().as_tuple().exponent
    if isinstance(exponent, int) and -exponent > places:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_AMOUNT,
                message=f"{field_name} must have at most {places} decimal places",
                field=field_name,
            )
        )
    return Success(value=amount)


def validate_enum(
    value: Any, enum_type: type[E], field_name: str
) -> Result[E, ValidationError]:
    """Parse a raw value into an enum member, rejecting unknown values.

    Accepts an existing member, its value, or its name (case-insensitive).
    There is no fallback member: unknown input is always a failure.

    Args:
        value: Raw value (usually a string from a request).
        enum_type: Enum class to parse into.
        field_name: Name of the field being validated.

    Returns:
        Success with the enum member, Failure with ValidationError otherwise.
    """
    if isinstance(value, enum_type):
        return Success(value=value)

    if isinstance(value, str):
        candidate = value.strip()
        for member in enum_type:
            if candidate.lower() in (str(member.value).lower(), member.name.lower()):
                return Success(value=member)

    allowed = ", ".join(str(member.value) for member in enum_type)
    return Failure(
        error=ValidationError(
            code=ErrorCode.INVALID_ENUM_VALUE,
            message=f"Invalid {field_name}: {value!r}. Allowed values: {allowed}",
            field=field_name,
        )
    )


def validate_pagination(
    page: int, limit: int, max_limit: int
) -> Result[tuple[int, int], ValidationError]:
    """Validate page/limit query parameters.

    Returns:
        Success with (page, limit), Failure with ValidationError otherwise.
    """
    if page < 1:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message="page must be greater than or equal to 1",
                field="page",
            )
        )
    if limit < 1 or limit > max_limit:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=f"limit must be between 1 and {max_limit}",
                field="limit",
            )
        )
    return Success(value=(page, limit))
