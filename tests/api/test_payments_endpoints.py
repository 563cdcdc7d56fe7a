"""API tests for payment endpoints.

Covers creation, purchase, processing, refund and cancellation over HTTP,
the list/search/statistics reads and the RFC 9457 rendering of processor
failures. Handlers run over in-memory repositories; Stripe is a scripted
stub and cash goes through the offline processor.
"""

from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.payment_processor_error import (
    PaymentProcessorRejectedError,
    PaymentProcessorUnavailableError,
)

BASE = "/api/v1"


def payment_body(**overrides):
    body = {
        "user_id": str(uuid7()),
        "event_id": str(uuid7()),
        "amount": "25.00",
        "currency": "EUR",
        "provider": "cash",
        "payment_method": "cash",
    }
    body.update(overrides)
    return body


def purchase(client, **overrides):
    return client.post(f"{BASE}/payments/purchase", json=payment_body(**overrides))


# =============================================================================
# Create / purchase
# =============================================================================


class TestCreatePayment:
    def test_create_returns_pending_payment(self, client):
        response = client.post(
            f"{BASE}/payments",
            json=payment_body(description="Early bird", metadata={"seat": "A1"}),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["amount"] == "25.00"
        assert data["currency"] == "EUR"
        assert data["provider"] == "cash"
        assert data["provider_payment_id"] is None
        assert data["metadata"] == {"seat": "A1"}

    @pytest.mark.parametrize(
        "overrides, code, field",
        [
            ({"amount": "0"}, "invalid_amount", "amount"),
            ({"amount": "-5.00"}, "invalid_amount", "amount"),
            ({"amount": "10.999"}, "invalid_amount", "amount"),
            ({"amount": "10.50", "currency": "CLP"}, "invalid_amount", "amount"),
            ({"currency": "XYZ"}, "invalid_enum_value", "currency"),
            ({"provider": "venmo"}, "invalid_enum_value", "provider"),
            ({"payment_method": "cheque"}, "invalid_enum_value", "payment_method"),
            ({"description": "d" * 501}, "value_too_long", "description"),
        ],
    )
    def test_invalid_input_is_400(self, client, overrides, code, field):
        response = client.post(f"{BASE}/payments", json=payment_body(**overrides))

        assert response.status_code == 400
        problem = response.json()
        assert problem["code"] == code
        assert problem["errors"][0]["field"] == field
        assert problem["type"].endswith("/errors/command_validation_failed")


class TestPurchaseTicket:
    def test_cash_purchase_completes(self, client):
        response = purchase(client)

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "completed"
        assert data["provider_payment_id"].startswith("offline_")

    def test_rejected_card_keeps_failed_payment_and_reports_its_id(
        self, client, platform
    ):
        platform.stripe.process_result = Failure(
            error=PaymentProcessorRejectedError(
                code=ErrorCode.PAYMENT_PROCESSOR_REJECTED,
                message="Your card was declined.",
                provider_name="stripe",
                processor_code="card_declined",
            )
        )

        response = purchase(client, provider="stripe", payment_method="credit_card")

        assert response.status_code == 502
        problem = response.json()
        assert problem["code"] == "payment_processor_rejected"
        payment_id = UUID(problem["details"]["payment_id"])
        assert platform.payments.stored(payment_id).status == PaymentStatus.FAILED

    def test_unsupported_provider_is_400(self, client):
        response = purchase(client, provider="paypal", payment_method="paypal")

        assert response.status_code == 400
        assert response.json()["code"] == "payment_provider_unsupported"


# =============================================================================
# Single payment transitions
# =============================================================================


class TestPaymentTransitions:
    def test_process_pending_payment(self, client):
        created = client.post(f"{BASE}/payments", json=payment_body()).json()

        response = client.post(f"{BASE}/payments/{created['id']}/process")

        assert response.status_code == 200
        assert response.json()["status"] == "completed"

    def test_process_twice_is_invalid_state(self, client):
        paid = purchase(client).json()

        response = client.post(f"{BASE}/payments/{paid['id']}/process")

        assert response.status_code == 409
        assert response.json()["code"] == "invalid_state_transition"

    def test_processor_outage_is_502(self, client, platform):
        platform.stripe.process_result = Failure(
            error=PaymentProcessorUnavailableError(
                code=ErrorCode.PAYMENT_PROCESSOR_UNAVAILABLE,
                message="Stripe is unavailable",
                provider_name="stripe",
            )
        )
        created = client.post(
            f"{BASE}/payments", json=payment_body(provider="stripe")
        ).json()

        response = client.post(f"{BASE}/payments/{created['id']}/process")

        assert response.status_code == 502
        assert response.json()["title"] == "External Service Error"

    def test_refund_completed_payment(self, client):
        paid = purchase(client).json()

        response = client.post(
            f"{BASE}/payments/{paid['id']}/refund", json={"reason": "duplicate"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "refunded"

    def test_refund_twice_is_400_already_refunded(self, client):
        paid = purchase(client).json()
        client.post(f"{BASE}/payments/{paid['id']}/refund")

        response = client.post(f"{BASE}/payments/{paid['id']}/refund")

        assert response.status_code == 400
        assert response.json()["code"] == "payment_already_refunded"

    def test_refund_pending_payment_is_not_refundable(self, client):
        created = client.post(f"{BASE}/payments", json=payment_body()).json()

        response = client.post(f"{BASE}/payments/{created['id']}/refund")

        assert response.status_code == 400
        assert response.json()["code"] == "payment_not_refundable"

    def test_cancel_pending_payment(self, client):
        created = client.post(f"{BASE}/payments", json=payment_body()).json()

        response = client.post(f"{BASE}/payments/{created['id']}/cancel")

        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"

    def test_cancel_completed_payment_is_invalid_state(self, client):
        paid = purchase(client).json()

        response = client.post(f"{BASE}/payments/{paid['id']}/cancel")

        assert response.status_code == 409
        assert response.json()["code"] == "invalid_state_transition"

    @pytest.mark.parametrize("action", ["process", "refund", "cancel"])
    def test_unknown_payment_is_404(self, client, action):
        response = client.post(f"{BASE}/payments/{uuid7()}/{action}")

        assert response.status_code == 404
        assert response.json()["code"] == "payment_not_found"


# =============================================================================
# Reads
# =============================================================================


class TestPaymentReads:
    def test_get_payment(self, client):
        paid = purchase(client).json()

        response = client.get(f"{BASE}/payments/{paid['id']}")

        assert response.status_code == 200
        assert response.json() == paid

    def test_get_unknown_payment_is_404(self, client):
        response = client.get(f"{BASE}/payments/{uuid7()}")

        assert response.status_code == 404
        assert response.json()["type"].endswith("/errors/not_found")

    def test_processor_status_reports_drift(self, client, platform):
        paid = purchase(client, provider="stripe", payment_method="credit_card").json()
        platform.stripe.status_result = Success(value=PaymentStatus.REFUNDED)

        response = client.get(f"{BASE}/payments/{paid['id']}/processor-status")

        assert response.status_code == 200
        assert response.json() == {
            "payment_id": paid["id"],
            "local_status": "completed",
            "remote_status": "refunded",
            "in_sync": False,
        }

    def test_user_and_event_listings(self, client):
        user_id, event_id = str(uuid7()), str(uuid7())
        purchase(client, user_id=user_id, event_id=event_id)
        purchase(client, user_id=user_id)
        purchase(client, event_id=event_id)

        by_user = client.get(f"{BASE}/users/{user_id}/payments").json()
        by_event = client.get(f"{BASE}/events/{event_id}/payments").json()

        assert by_user["total_count"] == 2
        assert {p["user_id"] for p in by_user["payments"]} == {user_id}
        assert by_event["total_count"] == 2

    def test_search_by_status_and_amount(self, client):
        purchase(client, amount="10.00")
        purchase(client, amount="50.00")
        client.post(f"{BASE}/payments", json=payment_body(amount="80.00"))

        response = client.get(
            f"{BASE}/payments", params={"status": "completed", "min_amount": "20"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 1
        assert data["payments"][0]["amount"] == "50.00"

    def test_search_rejects_unknown_status(self, client):
        response = client.get(f"{BASE}/payments", params={"status": "lost"})

        assert response.status_code == 400
        problem = response.json()
        assert problem["code"] == "invalid_enum_value"
        assert problem["type"].endswith("/errors/query_validation_failed")


class TestPaymentReporting:
    def test_stats_over_completed_payments(self, client):
        purchase(client, amount="10.00")
        purchase(client, amount="30.00")
        client.post(f"{BASE}/payments", json=payment_body(amount="99.00"))

        response = client.get(f"{BASE}/payments/stats")

        assert response.status_code == 200
        data = response.json()
        assert data["total_amount"] == "40.00"
        assert data["total_count"] == 2
        assert data["average_amount"] == "20.00"
        assert data["currency"] == "EUR"
        assert data["payments_by_status"] == {
            "pending": 1,
            "completed": 2,
            "failed": 0,
            "refunded": 0,
            "cancelled": 0,
        }

    def test_revenue_all_time(self, client):
        purchase(client, amount="12.50")
        purchase(client, amount="7.50")

        response = client.get(f"{BASE}/payments/revenue")

        assert response.status_code == 200
        data = response.json()
        assert data["period"] == "all"
        assert data["total"] == "20.00"
        assert data["transaction_count"] == 2
        assert data["start_date"] is None

    def test_revenue_rejects_unknown_timeframe(self, client):
        response = client.get(f"{BASE}/payments/revenue", params={"timeframe": "hourly"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "timeframe"
