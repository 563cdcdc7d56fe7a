"""Payment providers a payment can be routed through.

Each provider is served by a payment processor registered in the
infrastructure layer. Providers without a registered processor are rejected
when the payment is processed, not when it is created.
"""

from enum import Enum


class PaymentProvider(str, Enum):
    """Payment provider (who moves the money)."""

    STRIPE = "stripe"
    PAYPAL = "paypal"
    MERCADO_PAGO = "mercado_pago"
    BANK_TRANSFER = "bank_transfer"
    CASH = "cash"
    OTHER = "other"

    @classmethod
    def parse(cls, value: "str | PaymentProvider") -> "PaymentProvider":
        """Parse a raw provider string (case-insensitive, value or name).

        Raises:
            ValueError: If value is not a known provider.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for provider in cls:
            if normalized in (provider.value, provider.name.lower()):
                return provider
        raise ValueError(f"Invalid payment provider: {value!r}")

    @classmethod
    def values(cls) -> list[str]:
        """Get all provider values as strings."""
        return [provider.value for provider in cls]

    @classmethod
    def offline_providers(cls) -> list["PaymentProvider"]:
        """Providers settled outside any external API.

        Returns:
            list[PaymentProvider]: Providers confirmed on receipt.
        """
        return [cls.CASH, cls.BANK_TRANSFER, cls.OTHER]
