"""Unit tests for the payment command handlers.

Tests cover:
- CreatePaymentHandler (fail-closed parsing, amount rules)
- ProcessPaymentHandler (completion, processor failure/exception, unsettled
  receipts, unsupported providers)
- RefundPaymentHandler (refund rules, processor refusal)
- CancelPaymentHandler (pending only, remote void)
- PurchaseTicketHandler (create + process, failed payment id in details)

Architecture:
- In-memory payment repository, StubPaymentProcessor in a real
  PaymentProcessorRegistry
- RecordingEventBus captures published events
"""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.cancel_payment_handler import CancelPaymentHandler
from src.application.commands.handlers.create_payment_handler import CreatePaymentHandler
from src.application.commands.handlers.process_payment_handler import (
    ProcessPaymentHandler,
)
from src.application.commands.handlers.purchase_ticket_handler import (
    PurchaseTicketHandler,
)
from src.application.commands.handlers.refund_payment_handler import RefundPaymentHandler
from src.application.commands.payment_commands import (
    CancelPayment,
    CreatePayment,
    ProcessPayment,
    PurchaseTicket,
    RefundPayment,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, InvalidStateError, NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.errors.payment_processor_error import (
    PaymentProcessorError,
    PaymentProcessorRejectedError,
    PaymentProcessorUnavailableError,
    UnsupportedPaymentProviderError,
)
from src.domain.events.payment_events import (
    PaymentCancelled,
    PaymentCompleted,
    PaymentCreated,
    PaymentFailed,
    PaymentRefunded,
)
from src.domain.protocols.payment_processor_protocol import ProcessorReceipt
from src.infrastructure.payments.processor_registry import PaymentProcessorRegistry
from tests.conftest import create_payment
from tests.fakes import InMemoryPaymentRepository, RecordingEventBus, StubPaymentProcessor


def declined() -> PaymentProcessorRejectedError:
    return PaymentProcessorRejectedError(
        code=ErrorCode.PAYMENT_PROCESSOR_REJECTED,
        message="Your card was declined.",
        provider_name="stripe",
        processor_code="card_declined",
    )


@pytest.fixture
def repo():
    return InMemoryPaymentRepository()


@pytest.fixture
def event_bus():
    return RecordingEventBus()


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def stripe():
    return StubPaymentProcessor(PaymentProvider.STRIPE)


@pytest.fixture
def processors(stripe):
    return PaymentProcessorRegistry([stripe, StubPaymentProcessor(PaymentProvider.CASH)])


def create_command(**overrides) -> CreatePayment:
    fields = {
        "user_id": uuid7(),
        "event_id": uuid7(),
        "amount": "25.00",
        "currency": "EUR",
        "provider": "stripe",
        "payment_method": "credit_card",
    }
    fields.update(overrides)
    return CreatePayment(**fields)


# =============================================================================
# Create
# =============================================================================


@pytest.mark.unit
class TestCreatePaymentHandler:
    """Test CreatePaymentHandler."""

    @pytest.mark.asyncio
    async def test_create_pending_payment(self, repo, event_bus, mock_logger):
        # Arrange
        handler = CreatePaymentHandler(repo, event_bus, mock_logger)

        # Act
        result = await handler.handle(create_command(metadata={"seat": "B12"}))

        # Assert
        assert isinstance(result, Success)
        payment = result.value
        assert payment.status == "pending"
        assert payment.amount == Decimal("25.00")
        assert payment.currency == "EUR"
        assert payment.provider == "stripe"
        assert payment.payment_method == "credit_card"
        assert payment.metadata == {"seat": "B12"}
        assert (await repo.find_by_id(payment.id)) is not None
        assert event_bus.types == [PaymentCreated]

    @pytest.mark.asyncio
    async def test_create_accepts_unknown_method_explicitly(self, repo, event_bus, mock_logger):
        result = await CreatePaymentHandler(repo, event_bus, mock_logger).handle(
            create_command(payment_method="unknown")
        )

        assert isinstance(result, Success)
        assert result.value.payment_method == "unknown"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("field", "value", "code"),
        [
            ("amount", "0", ErrorCode.INVALID_AMOUNT),
            ("amount", "-1", ErrorCode.INVALID_AMOUNT),
            ("amount", "10.001", ErrorCode.INVALID_AMOUNT),
            ("amount", "ten", ErrorCode.INVALID_AMOUNT),
            ("currency", "GBP", ErrorCode.INVALID_ENUM_VALUE),
            ("provider", "venmo", ErrorCode.INVALID_ENUM_VALUE),
            ("payment_method", "barter", ErrorCode.INVALID_ENUM_VALUE),
            ("description", "d" * 501, ErrorCode.VALUE_TOO_LONG),
        ],
    )
    async def test_create_rejects_invalid_input(
        self, repo, event_bus, mock_logger, field, value, code
    ):
        result = await CreatePaymentHandler(repo, event_bus, mock_logger).handle(
            create_command(**{field: value})
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == code
        assert result.error.field == field
        assert await repo.find_all() == []
        assert event_bus.published == []

    @pytest.mark.asyncio
    async def test_create_rejects_fractional_amount_in_zero_decimal_currency(
        self, repo, event_bus, mock_logger
    ):
        result = await CreatePaymentHandler(repo, event_bus, mock_logger).handle(
            create_command(amount="10.50", currency="CLP")
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_AMOUNT
        assert result.error.field == "amount"
        assert await repo.find_all() == []
        assert event_bus.published == []

    @pytest.mark.asyncio
    async def test_create_accepts_whole_amount_in_zero_decimal_currency(
        self, repo, event_bus, mock_logger
    ):
        result = await CreatePaymentHandler(repo, event_bus, mock_logger).handle(
            create_command(amount="15000", currency="CLP")
        )

        assert isinstance(result, Success)
        assert result.value.amount == Decimal("15000")
        assert result.value.currency == "CLP"

    @pytest.mark.asyncio
    async def test_create_requires_user(self, repo, event_bus, mock_logger):
        result = await CreatePaymentHandler(repo, event_bus, mock_logger).handle(
            create_command(user_id=None)
        )

        assert isinstance(result, Failure)
        assert result.error.field == "user_id"


# =============================================================================
# Process
# =============================================================================


@pytest.mark.unit
class TestProcessPaymentHandler:
    """Test ProcessPaymentHandler."""

    @pytest.mark.asyncio
    async def test_process_completes_payment(
        self, event_bus, mock_logger, stripe, processors
    ):
        payment = create_payment(provider=PaymentProvider.STRIPE)
        repo = InMemoryPaymentRepository([payment])
        stripe.process_result = Success(
            value=ProcessorReceipt(
                provider_payment_id="pi_1",
                status=PaymentStatus.COMPLETED,
                raw={"intent_status": "succeeded"},
            )
        )

        result = await ProcessPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            ProcessPayment(payment_id=payment.id)
        )

        assert isinstance(result, Success)
        assert result.value.status == "completed"
        assert result.value.provider_payment_id == "pi_1"
        stored = repo.stored(payment.id)
        assert stored.status == PaymentStatus.COMPLETED
        assert stored.metadata["processor"] == {"intent_status": "succeeded"}
        assert event_bus.types == [PaymentCompleted]

    @pytest.mark.asyncio
    async def test_processor_failure_marks_payment_failed(
        self, event_bus, mock_logger, stripe, processors
    ):
        payment = create_payment(provider=PaymentProvider.STRIPE)
        repo = InMemoryPaymentRepository([payment])
        stripe.process_result = Failure(error=declined())

        result = await ProcessPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            ProcessPayment(payment_id=payment.id)
        )

        assert isinstance(result, Failure)
        assert result.error == declined()
        stored = repo.stored(payment.id)
        assert stored.status == PaymentStatus.FAILED
        assert stored.metadata["error"]["message"] == "Your card was declined."
        assert stored.metadata["error"]["code"] == "payment_processor_rejected"
        failed = event_bus.of_type(PaymentFailed)
        assert len(failed) == 1
        assert failed[0].reason == "Your card was declined."

    @pytest.mark.asyncio
    async def test_processor_exception_marks_payment_failed(
        self, event_bus, mock_logger, stripe, processors
    ):
        payment = create_payment(provider=PaymentProvider.STRIPE)
        repo = InMemoryPaymentRepository([payment])
        stripe.raises = ConnectionError("socket closed")

        result = await ProcessPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            ProcessPayment(payment_id=payment.id)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, PaymentProcessorError)
        assert result.error.code == ErrorCode.PAYMENT_PROCESSOR_ERROR
        assert result.error.message == "socket closed"
        assert repo.stored(payment.id).status == PaymentStatus.FAILED
        mock_logger.error.assert_called_once()
        assert event_bus.types == [PaymentFailed]

    @pytest.mark.asyncio
    async def test_original_error_returned_when_failed_status_cannot_be_saved(
        self, event_bus, mock_logger, stripe, processors
    ):
        payment = create_payment(provider=PaymentProvider.STRIPE)
        mock_repo = AsyncMock()
        mock_repo.find_by_id.return_value = payment
        mock_repo.save_transition.side_effect = RuntimeError("database down")
        stripe.process_result = Failure(error=declined())

        result = await ProcessPaymentHandler(
            mock_repo, processors, event_bus, mock_logger
        ).handle(ProcessPayment(payment_id=payment.id))

        assert isinstance(result, Failure)
        assert result.error == declined()
        mock_logger.error.assert_called_once()
        assert event_bus.types == [PaymentFailed]

    @pytest.mark.asyncio
    async def test_unsupported_provider_marks_payment_failed(
        self, event_bus, mock_logger, processors
    ):
        payment = create_payment(provider=PaymentProvider.PAYPAL)
        repo = InMemoryPaymentRepository([payment])

        result = await ProcessPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            ProcessPayment(payment_id=payment.id)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, UnsupportedPaymentProviderError)
        assert result.error.code == ErrorCode.PAYMENT_PROVIDER_UNSUPPORTED
        assert repo.stored(payment.id).status == PaymentStatus.FAILED

    @pytest.mark.asyncio
    async def test_unsettled_receipt_keeps_payment_pending(
        self, event_bus, mock_logger, stripe, processors
    ):
        payment = create_payment(provider=PaymentProvider.STRIPE)
        repo = InMemoryPaymentRepository([payment])
        stripe.process_result = Success(
            value=ProcessorReceipt(provider_payment_id="pi_3ds", status=PaymentStatus.PENDING)
        )

        result = await ProcessPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            ProcessPayment(payment_id=payment.id)
        )

        assert isinstance(result, Success)
        assert result.value.status == "pending"
        stored = repo.stored(payment.id)
        assert stored.status == PaymentStatus.PENDING
        assert stored.provider_payment_id == "pi_3ds"
        assert event_bus.published == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [PaymentStatus.FAILED, PaymentStatus.CANCELLED])
    async def test_receipt_reporting_failure_marks_payment_failed(
        self, event_bus, mock_logger, stripe, processors, status
    ):
        payment = create_payment(provider=PaymentProvider.STRIPE)
        repo = InMemoryPaymentRepository([payment])
        stripe.process_result = Success(
            value=ProcessorReceipt(provider_payment_id="pi_x", status=status)
        )

        result = await ProcessPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            ProcessPayment(payment_id=payment.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PAYMENT_PROCESSOR_REJECTED
        assert repo.stored(payment.id).status == PaymentStatus.FAILED

    @pytest.mark.asyncio
    async def test_process_non_pending_is_invalid_state(
        self, event_bus, mock_logger, stripe, processors
    ):
        payment = create_payment(status=PaymentStatus.COMPLETED)
        repo = InMemoryPaymentRepository([payment])

        result = await ProcessPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            ProcessPayment(payment_id=payment.id)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, InvalidStateError)
        assert result.error.current_state == "completed"
        assert stripe.calls["process"] == []

    @pytest.mark.asyncio
    async def test_process_missing_payment_is_not_found(
        self, repo, event_bus, mock_logger, processors
    ):
        result = await ProcessPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            ProcessPayment(payment_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.PAYMENT_NOT_FOUND


# =============================================================================
# Refund
# =============================================================================


@pytest.mark.unit
class TestRefundPaymentHandler:
    """Test RefundPaymentHandler."""

    @pytest.mark.asyncio
    async def test_refund_completed_payment(self, event_bus, mock_logger, stripe, processors):
        payment = create_payment(
            provider=PaymentProvider.STRIPE, status=PaymentStatus.COMPLETED
        )
        repo = InMemoryPaymentRepository([payment])

        result = await RefundPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            RefundPayment(payment_id=payment.id, reason="duplicate")
        )

        assert isinstance(result, Success)
        assert result.value.status == "refunded"
        stored = repo.stored(payment.id)
        assert stored.metadata["refund_reason"] == "duplicate"
        assert stored.metadata["refund_id"].startswith("re_")
        assert stripe.refund_reasons == ["duplicate"]
        refunded = event_bus.of_type(PaymentRefunded)
        assert refunded[0].reason == "duplicate"
        assert refunded[0].amount == Decimal("25.00")

    @pytest.mark.asyncio
    async def test_refund_without_processor_reference_skips_processor(
        self, event_bus, mock_logger, stripe, processors
    ):
        payment = create_payment(provider=PaymentProvider.STRIPE, status=PaymentStatus.PENDING)
        payment.status = PaymentStatus.COMPLETED
        repo = InMemoryPaymentRepository([payment])

        result = await RefundPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            RefundPayment(payment_id=payment.id)
        )

        assert isinstance(result, Success)
        assert stripe.calls["refund"] == []
        assert "refund_id" not in repo.stored(payment.id).metadata

    @pytest.mark.asyncio
    async def test_refund_twice_reports_already_refunded(
        self, event_bus, mock_logger, processors
    ):
        payment = create_payment(status=PaymentStatus.REFUNDED)
        repo = InMemoryPaymentRepository([payment])

        result = await RefundPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            RefundPayment(payment_id=payment.id)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.PAYMENT_ALREADY_REFUNDED

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status", [PaymentStatus.PENDING, PaymentStatus.FAILED, PaymentStatus.CANCELLED]
    )
    async def test_refund_requires_completed(
        self, event_bus, mock_logger, processors, status
    ):
        payment = create_payment(status=status)
        repo = InMemoryPaymentRepository([payment])

        result = await RefundPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            RefundPayment(payment_id=payment.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PAYMENT_NOT_REFUNDABLE
        assert repo.stored(payment.id).status == status

    @pytest.mark.asyncio
    async def test_processor_refusal_leaves_payment_completed(
        self, event_bus, mock_logger, stripe, processors
    ):
        payment = create_payment(
            provider=PaymentProvider.STRIPE, status=PaymentStatus.COMPLETED
        )
        repo = InMemoryPaymentRepository([payment])
        stripe.refund_result = Failure(
            error=PaymentProcessorUnavailableError(
                code=ErrorCode.PAYMENT_PROCESSOR_UNAVAILABLE,
                message="Stripe is unavailable",
                provider_name="stripe",
            )
        )

        result = await RefundPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            RefundPayment(payment_id=payment.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PAYMENT_PROCESSOR_UNAVAILABLE
        assert repo.stored(payment.id).status == PaymentStatus.COMPLETED
        assert event_bus.published == []

    @pytest.mark.asyncio
    async def test_concurrent_refund_is_conflict(self, event_bus, mock_logger, processors):
        payment = create_payment(status=PaymentStatus.COMPLETED)
        mock_repo = AsyncMock()
        mock_repo.find_by_id.return_value = payment
        mock_repo.save_transition.return_value = False

        result = await RefundPaymentHandler(
            mock_repo, processors, event_bus, mock_logger
        ).handle(RefundPayment(payment_id=payment.id))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.CONCURRENT_MODIFICATION


# =============================================================================
# Cancel
# =============================================================================


@pytest.mark.unit
class TestCancelPaymentHandler:
    """Test CancelPaymentHandler."""

    @pytest.mark.asyncio
    async def test_cancel_pending_payment(self, event_bus, mock_logger, stripe, processors):
        payment = create_payment(provider=PaymentProvider.STRIPE)
        repo = InMemoryPaymentRepository([payment])

        result = await CancelPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            CancelPayment(payment_id=payment.id)
        )

        assert isinstance(result, Success)
        assert result.value.status == "cancelled"
        assert stripe.calls["cancel"] == []
        assert event_bus.types == [PaymentCancelled]

    @pytest.mark.asyncio
    async def test_cancel_voids_started_charge(self, event_bus, mock_logger, stripe, processors):
        payment = create_payment(provider=PaymentProvider.STRIPE, provider_payment_id="pi_9")
        repo = InMemoryPaymentRepository([payment])

        result = await CancelPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            CancelPayment(payment_id=payment.id)
        )

        assert isinstance(result, Success)
        assert len(stripe.calls["cancel"]) == 1

    @pytest.mark.asyncio
    async def test_cancel_void_failure_keeps_pending(
        self, event_bus, mock_logger, stripe, processors
    ):
        payment = create_payment(provider=PaymentProvider.STRIPE, provider_payment_id="pi_9")
        repo = InMemoryPaymentRepository([payment])
        stripe.cancel_result = Failure(error=declined())

        result = await CancelPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            CancelPayment(payment_id=payment.id)
        )

        assert isinstance(result, Failure)
        assert repo.stored(payment.id).status == PaymentStatus.PENDING

    @pytest.mark.asyncio
    async def test_cancel_completed_is_invalid_state(self, event_bus, mock_logger, processors):
        payment = create_payment(status=PaymentStatus.COMPLETED)
        repo = InMemoryPaymentRepository([payment])

        result = await CancelPaymentHandler(repo, processors, event_bus, mock_logger).handle(
            CancelPayment(payment_id=payment.id)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, InvalidStateError)


# =============================================================================
# Purchase
# =============================================================================


@pytest.mark.unit
class TestPurchaseTicketHandler:
    """Test PurchaseTicketHandler."""

    def build(self, repo, event_bus, mock_logger, processors) -> PurchaseTicketHandler:
        return PurchaseTicketHandler(
            CreatePaymentHandler(repo, event_bus, mock_logger),
            ProcessPaymentHandler(repo, processors, event_bus, mock_logger),
        )

    @pytest.mark.asyncio
    async def test_purchase_creates_and_completes(
        self, repo, event_bus, mock_logger, processors
    ):
        handler = self.build(repo, event_bus, mock_logger, processors)

        result = await handler.handle(
            PurchaseTicket(
                user_id=uuid7(),
                event_id=uuid7(),
                amount=Decimal("40.00"),
                currency="USD",
                provider="cash",
            )
        )

        assert isinstance(result, Success)
        assert result.value.status == "completed"
        assert event_bus.types == [PaymentCreated, PaymentCompleted]

    @pytest.mark.asyncio
    async def test_purchase_failure_reports_payment_id(
        self, repo, event_bus, mock_logger, stripe, processors
    ):
        stripe.process_result = Failure(error=declined())
        handler = self.build(repo, event_bus, mock_logger, processors)

        result = await handler.handle(
            PurchaseTicket(
                user_id=uuid7(),
                event_id=uuid7(),
                amount="40.00",
                currency="USD",
                provider="stripe",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PAYMENT_PROCESSOR_REJECTED
        [payment] = await repo.find_all()
        assert result.error.details["payment_id"] == str(payment.id)
        assert payment.status == PaymentStatus.FAILED

    @pytest.mark.asyncio
    async def test_purchase_validation_failure_creates_nothing(
        self, repo, event_bus, mock_logger, processors
    ):
        handler = self.build(repo, event_bus, mock_logger, processors)

        result = await handler.handle(
            PurchaseTicket(
                user_id=uuid7(),
                event_id=uuid7(),
                amount="40.00",
                currency="XXX",
                provider="stripe",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.field == "currency"
        assert await repo.find_all() == []
