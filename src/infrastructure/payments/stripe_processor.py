"""Stripe payment processor.

Talks to the Stripe REST API over httpx (form-encoded requests, Bearer
secret key). Charges are modelled as PaymentIntents:

- process: confirm the intent when one exists, otherwise create it
  (confirmed immediately when a ``payment_method_id`` is present in the
  payment metadata)
- refund: create a refund for the intent
- check status: retrieve the intent
- cancel: cancel the intent

Amounts are sent in minor units (cents for most currencies).
"""

from typing import Any

from src.core.constants import PROCESSOR_TIMEOUT_DEFAULT
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.payment import Payment
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.payment_processor_error import PaymentProcessorError
from src.domain.protocols.payment_processor_protocol import ProcessorReceipt
from src.infrastructure.payments.base_api_client import BaseProcessorAPIClient

STRIPE_API_BASE = "https://api.stripe.com/v1"

_INTENT_STATUS: dict[str, PaymentStatus] = {
    "succeeded": PaymentStatus.COMPLETED,
    "canceled": PaymentStatus.CANCELLED,
}


def map_intent_status(stripe_status: str) -> PaymentStatus:
    """Map a PaymentIntent status to a payment status.

    Every status other than succeeded/canceled (requires_payment_method,
    requires_confirmation, requires_action, processing, requires_capture)
    means the charge is not settled yet.
    """
    return _INTENT_STATUS.get(stripe_status, PaymentStatus.PENDING)


class StripePaymentProcessor(BaseProcessorAPIClient):
    """PaymentProcessorProtocol implementation for Stripe.

    Args:
        api_key: Stripe secret key.
        base_url: API base URL (overridable for tests and stripe-mock).
        timeout: HTTP request timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = STRIPE_API_BASE,
        timeout: float = PROCESSOR_TIMEOUT_DEFAULT,
    ) -> None:
        super().__init__(base_url=base_url, provider_name="stripe", timeout=timeout)
        self._api_key = api_key

    @property
    def provider(self) -> PaymentProvider:
        return PaymentProvider.STRIPE

    def _headers(self, idempotency_key: str | None = None) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self._api_key}"}
        if idempotency_key is not None:
            headers["Idempotency-Key"] = idempotency_key
        return headers

    def _missing_key(self) -> Failure[PaymentProcessorError] | None:
        if self._api_key:
            return None
        return Failure(
            error=PaymentProcessorError(
                code=ErrorCode.PAYMENT_PROCESSOR_ERROR,
                message="Stripe API key is not configured",
                provider_name="stripe",
            )
        )

    async def process_payment(
        self, payment: Payment
    ) -> Result[ProcessorReceipt, PaymentProcessorError]:
        if (missing := self._missing_key()) is not None:
            return missing

        if payment.provider_payment_id:
            result = await self._execute_and_parse_object(
                method="POST",
                path=f"/payment_intents/{payment.provider_payment_id}/confirm",
                headers=self._headers(f"payment-{payment.id}-confirm"),
                operation="confirm_payment_intent",
            )
        else:
            result = await self._execute_and_parse_object(
                method="POST",
                path="/payment_intents",
                headers=self._headers(f"payment-{payment.id}-create"),
                form_data=self._intent_params(payment),
                operation="create_payment_intent",
            )

        match result:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=intent):
                return Success(value=self._receipt(intent))

    async def refund_payment(
        self, payment: Payment, reason: str | None = None
    ) -> Result[ProcessorReceipt, PaymentProcessorError]:
        if (missing := self._missing_key()) is not None:
            return missing

        form_data = {"payment_intent": payment.provider_payment_id or ""}
        if reason:
            form_data["metadata[reason]"] = reason
        result = await self._execute_and_parse_object(
            method="POST",
            path="/refunds",
            headers=self._headers(f"payment-{payment.id}-refund"),
            form_data=form_data,
            operation="create_refund",
        )

        match result:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=refund):
                if refund.get("status") == "failed":
                    return Failure(
                        error=PaymentProcessorError(
                            code=ErrorCode.PAYMENT_PROCESSOR_REJECTED,
                            message="Stripe reported the refund as failed",
                            provider_name="stripe",
                            details={"refund_id": refund.get("id")},
                        )
                    )
                return Success(
                    value=ProcessorReceipt(
                        provider_payment_id=str(refund.get("id", "")),
                        status=PaymentStatus.REFUNDED,
                        raw={"refund_status": refund.get("status")},
                    )
                )

    async def check_payment_status(
        self, payment: Payment
    ) -> Result[PaymentStatus, PaymentProcessorError]:
        if (missing := self._missing_key()) is not None:
            return missing

        if not payment.provider_payment_id:
            return Success(value=payment.status)

        result = await self._execute_and_parse_object(
            method="GET",
            path=f"/payment_intents/{payment.provider_payment_id}",
            headers=self._headers(),
            operation="retrieve_payment_intent",
        )
        match result:
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=intent):
                return Success(value=map_intent_status(str(intent.get("status", ""))))

    async def cancel_payment(self, payment: Payment) -> Result[None, PaymentProcessorError]:
        if (missing := self._missing_key()) is not None:
            return missing

        result = await self._execute_and_parse_object(
            method="POST",
            path=f"/payment_intents/{payment.provider_payment_id}/cancel",
            headers=self._headers(f"payment-{payment.id}-cancel"),
            operation="cancel_payment_intent",
        )
        match result:
            case Failure(error=error):
                return Failure(error=error)
            case Success():
                return Success(value=None)

    def _intent_params(self, payment: Payment) -> dict[str, str]:
        params = {
            "amount": str(payment.amount.to_minor_units()),
            "currency": payment.currency.value.lower(),
            "metadata[payment_id]": str(payment.id),
            "metadata[event_id]": str(payment.event_id),
            "metadata[user_id]": str(payment.user_id),
        }
        if payment.description:
            params["description"] = payment.description

        payment_method_id = payment.metadata.get("payment_method_id")
        if payment_method_id:
            params["payment_method"] = str(payment_method_id)
            params["confirm"] = "true"
            params["automatic_payment_methods[enabled]"] = "true"
            params["automatic_payment_methods[allow_redirects]"] = "never"
        else:
            params["automatic_payment_methods[enabled]"] = "true"
        return params

    def _receipt(self, intent: dict[str, Any]) -> ProcessorReceipt:
        raw: dict[str, Any] = {"intent_status": intent.get("status")}
        if intent.get("client_secret"):
            raw["client_secret"] = intent["client_secret"]
        return ProcessorReceipt(
            provider_payment_id=str(intent.get("id", "")),
            status=map_intent_status(str(intent.get("status", ""))),
            raw=raw,
        )
