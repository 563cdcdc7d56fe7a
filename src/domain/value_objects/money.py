"""Immutable Money value object with Decimal precision.

Ticket prices and revenue totals require exact precision; floats introduce
rounding errors that accumulate when summing many payments. This module
provides a Money value object backed by Python's Decimal type and the
Currency enum.

Error Handling:
    Arithmetic operations between different currencies raise
    CurrencyMismatchError (a ValueError subclass), following Python's
    convention for type-incompatible operations.

Usage:
    from decimal import Decimal
    from src.domain.enums import Currency
    from src.domain.value_objects import Money

    price = Money(Decimal("25.00"), Currency.EUR)
    total = price + Money(Decimal("5.00"), Currency.EUR)  # Money(30.00, EUR)
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Self

from src.domain.enums.currency import Currency


class CurrencyMismatchError(ValueError):
    """Raised when attempting operations on different currencies."""

    def __init__(self, currency1: Currency, currency2: Currency) -> None:
        super().__init__(
            f"Cannot perform operation between {currency1.value} and {currency2.value}"
        )
        self.currency1 = currency1
        self.currency2 = currency2


@dataclass(frozen=True)
class Money:
    """Immutable monetary value with currency.

    Attributes:
        amount: Decimal value.
        currency: Currency enum member. Raw codes are parsed on creation.

    Currency Safety:
        Operations between different currencies raise CurrencyMismatchError.

    Warning:
        Always use string initialization for Decimal to avoid float precision:
        >>> Money(Decimal("0.1"), Currency.USD)  # Correct
        >>> Money(Decimal(0.1), Currency.USD)    # Wrong - already imprecise!
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        """Normalize amount and currency.

        Raises:
            ValueError: If amount is not a finite number or currency is unknown.
        """
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except (InvalidOperation, TypeError) as e:
                raise ValueError(f"Amount must be a valid number: {e}") from e

        if self.amount.is_nan() or self.amount.is_infinite():
            raise ValueError("Amount cannot be NaN or Infinite")

        object.__setattr__(self, "currency", Currency.parse(self.currency))

    def __add__(self, other: "Money") -> "Money":
        """Add two Money values.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money values.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount >= other.amount

    def is_positive(self) -> bool:
        """Check if amount is positive (> 0)."""
        return self.amount > 0

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0

    def to_minor_units(self) -> int:
        """Convert to the processor's smallest unit (cents for most currencies).

        Returns:
            int: Amount in minor units, rounded half up.

        Example:
            >>> Money(Decimal("19.99"), Currency.USD).to_minor_units()
            1999
        """
        factor = Decimal(10) ** self.currency.minor_unit_exponent
        return int((self.amount * factor).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @classmethod
    def zero(cls, currency: Currency = Currency.EUR) -> Self:
        """Create Money with zero amount."""
        return cls(Decimal("0"), currency)

    @classmethod
    def from_minor_units(cls, units: int, currency: Currency) -> Self:
        """Create Money from an amount in minor units (as returned by processors)."""
        factor = Decimal(10) ** currency.minor_unit_exponent
        return cls(Decimal(units) / factor, currency)

    def _check_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency.value}"
