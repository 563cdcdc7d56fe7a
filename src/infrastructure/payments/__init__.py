"""Payment processor adapters."""

from src.infrastructure.payments.offline_processor import OfflinePaymentProcessor
from src.infrastructure.payments.processor_registry import PaymentProcessorRegistry
from src.infrastructure.payments.stripe_processor import StripePaymentProcessor

__all__ = [
    "OfflinePaymentProcessor",
    "PaymentProcessorRegistry",
    "StripePaymentProcessor",
]
