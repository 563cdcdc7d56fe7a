"""Payment processor error types for the processor protocol contract.

These errors define the failure cases that payment processor
implementations (Stripe, offline settlement, ...) can return.

Architecture:
- Domain layer errors (part of protocol contract)
- Inherit from DomainError (core layer)
- Infrastructure processors return these errors, never raise them

Usage:
    from src.domain.errors import PaymentProcessorError

    async def process_payment(
        self, payment: Payment
    ) -> Result[ProcessorReceipt, PaymentProcessorError]:
        ...
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentProcessorError(DomainError):
    """Base payment processor error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        provider_name: Provider that produced the error (stripe, cash, ...).
        details: Additional context (processor error code, response).
    """

    provider_name: str
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentProcessorUnavailableError(PaymentProcessorError):
    """Processor could not be reached.

    Returned when:
    - The processor API returns 5xx errors
    - The call times out
    - The connection is refused

    Attributes:
        is_transient: Whether a later retry could succeed.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentProcessorRejectedError(PaymentProcessorError):
    """Processor refused the operation (card declined, invalid request)."""

    processor_code: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UnsupportedPaymentProviderError(PaymentProcessorError):
    """No processor is registered for the payment's provider."""

    pass
