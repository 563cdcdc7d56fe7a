"""Payment processor registry.

Maps each provider to the processor serving it. Providers without a
processor (PayPal and Mercado Pago have no integration) resolve to
UnsupportedPaymentProviderError.
"""

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.errors.payment_processor_error import (
    PaymentProcessorError,
    UnsupportedPaymentProviderError,
)
from src.domain.protocols.payment_processor_protocol import PaymentProcessorProtocol


class PaymentProcessorRegistry:
    """PaymentProcessorRegistryProtocol implementation.

    Example:
        >>> registry = PaymentProcessorRegistry(
        ...     [StripePaymentProcessor(api_key=key), OfflinePaymentProcessor(PaymentProvider.CASH)]
        ... )
        >>> registry.get(PaymentProvider.STRIPE)
    """

    def __init__(self, processors: list[PaymentProcessorProtocol]) -> None:
        self._processors: dict[PaymentProvider, PaymentProcessorProtocol] = {
            processor.provider: processor for processor in processors
        }

    @property
    def supported_providers(self) -> list[PaymentProvider]:
        return list(self._processors)

    def get(
        self, provider: PaymentProvider
    ) -> Result[PaymentProcessorProtocol, PaymentProcessorError]:
        processor = self._processors.get(provider)
        if processor is None:
            return Failure(
                error=UnsupportedPaymentProviderError(
                    code=ErrorCode.PAYMENT_PROVIDER_UNSUPPORTED,
                    message=f"No payment processor available for provider '{provider.value}'",
                    provider_name=provider.value,
                )
            )
        return Success(value=processor)
