"""Payment instruments used by the payer."""

from enum import Enum


class PaymentMethod(str, Enum):
    """How the payer paid (card, cash, wallet...).

    UNKNOWN is an explicit value a client may send when the instrument
    is not known at purchase time. It is never substituted for bad input.
    """

    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PAYPAL = "paypal"
    BANK_TRANSFER = "bank_transfer"
    CASH = "cash"
    CRYPTO = "crypto"
    OTHER = "other"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: "str | PaymentMethod") -> "PaymentMethod":
        """Parse a raw payment method string.

        Raises:
            ValueError: If value is not a known payment method.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for method in cls:
            if normalized in (method.value, method.name.lower()):
                return method
        raise ValueError(f"Invalid payment method: {value!r}")

    @classmethod
    def values(cls) -> list[str]:
        """Get all payment method values as strings."""
        return [method.value for method in cls]
