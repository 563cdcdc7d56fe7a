"""Payment processor dependency factory.

Application-scoped processor registry. Stripe is wired with the
configured secret key; cash, bank transfer and other payments are settled
offline. PayPal and Mercado Pago have no processor and resolve to
UnsupportedPaymentProviderError.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.payment_processor_protocol import (
        PaymentProcessorRegistryProtocol,
    )


@lru_cache()
def get_payment_processors() -> "PaymentProcessorRegistryProtocol":
    """Get payment processor registry singleton (app-scoped).

    Returns:
        Registry implementing PaymentProcessorRegistryProtocol.
    """
    from src.domain.enums.payment_provider import PaymentProvider
    from src.infrastructure.payments import (
        OfflinePaymentProcessor,
        PaymentProcessorRegistry,
        StripePaymentProcessor,
    )

    return PaymentProcessorRegistry(
        [
            StripePaymentProcessor(
                api_key=settings.stripe_api_key or "",
                base_url=f"{settings.stripe_api_base}/v1",
                timeout=settings.payment_processor_timeout,
            ),
            OfflinePaymentProcessor(PaymentProvider.CASH),
            OfflinePaymentProcessor(PaymentProvider.BANK_TRANSFER),
            OfflinePaymentProcessor(PaymentProvider.OTHER),
        ]
    )
