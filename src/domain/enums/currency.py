"""Currencies accepted for event payments.

ISO 4217 codes for the markets the platform operates in, plus OTHER for
settlement in a currency tracked outside the platform.
"""

from enum import Enum


class Currency(str, Enum):
    """Supported payment currencies (uppercase ISO 4217 codes)."""

    USD = "USD"  # US Dollar
    EUR = "EUR"  # Euro
    MXN = "MXN"  # Mexican Peso
    COP = "COP"  # Colombian Peso
    BRL = "BRL"  # Brazilian Real
    ARS = "ARS"  # Argentine Peso
    CLP = "CLP"  # Chilean Peso
    PEN = "PEN"  # Peruvian Sol
    UYU = "UYU"  # Uruguayan Peso
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: "str | Currency") -> "Currency":
        """Parse a currency code (case-insensitive).

        Args:
            value: Currency code or member.

        Returns:
            Currency: Matching member.

        Raises:
            ValueError: If the code is not supported. There is no default.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().upper()
        for currency in cls:
            if currency.value == normalized:
                return currency
        raise ValueError(f"Invalid currency code: {value!r}")

    @classmethod
    def values(cls) -> list[str]:
        """Get all currency codes as strings."""
        return [currency.value for currency in cls]

    @property
    def minor_unit_exponent(self) -> int:
        """Number of decimal places used by the processor's smallest unit.

        CLP has no minor unit; every other supported currency uses cents.
        """
        return 0 if self is Currency.CLP else 2
