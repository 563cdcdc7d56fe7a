"""Cancel an attendance and refund its payments.

Flow:
1. Cancel the attendance (any failure is returned, nothing is refunded)
2. Refund every COMPLETED payment the user made for the event
3. Report refunded payments and per-payment failures

Refund failures do not undo the cancellation. They are logged at warning
level, published as AttendanceRefundPartiallyFailed and returned in the
CancellationOutcome.
"""

from src.application.commands.attendance_commands import (
    CancelAttendance,
    CancelAttendanceAndRefund,
)
from src.application.commands.handlers.cancel_attendance_handler import (
    CancelAttendanceHandler,
)
from src.application.commands.handlers.refund_payment_handler import (
    RefundPaymentHandler,
)
from src.application.commands.payment_commands import RefundPayment
from src.application.dtos.attendance_dtos import CancellationOutcome, RefundFailure
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.payment import Payment
from src.domain.enums.payment_status import PaymentStatus
from src.domain.events.payment_events import AttendanceRefundPartiallyFailed
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.payment_repository import PaymentRepository


class CancelAttendanceAndRefundHandler:
    """Handler for CancelAttendanceAndRefund command.

    Composes the cancel-attendance and refund-payment handlers so both
    steps keep their own validation, persistence and events.
    """

    def __init__(
        self,
        cancel_handler: CancelAttendanceHandler,
        refund_handler: RefundPaymentHandler,
        payment_repo: PaymentRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._cancel_handler = cancel_handler
        self._refund_handler = refund_handler
        self._payment_repo = payment_repo
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: CancelAttendanceAndRefund
    ) -> Result[CancellationOutcome, DomainError]:
        """Handle cancel-and-refund command.

        Returns:
            Success(CancellationOutcome): Attendance cancelled; refunds listed.
            Failure(DomainError): Cancellation failed; no refund attempted.
        """
        match await self._cancel_handler.handle(
            CancelAttendance(event_id=cmd.event_id, user_id=cmd.user_id)
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=attendance):
                pass

        outcome = CancellationOutcome(attendance=attendance)
        payments = await self._payment_repo.find_by_event_and_user(
            attendance.event_id, attendance.user_id
        )
        for payment in payments:
            if payment.status != PaymentStatus.COMPLETED:
                continue
            failure = await self._refund(payment, cmd.reason)
            if failure is None:
                outcome.refunded_payment_ids.append(payment.id)
            else:
                outcome.failed_refunds.append(failure)

        if outcome.failed_refunds:
            self._logger.warning(
                "Attendance cancelled but some refunds failed",
                attendance_id=str(attendance.id),
                refunded=len(outcome.refunded_payment_ids),
                failed=len(outcome.failed_refunds),
                failed_payment_ids=[str(f.payment_id) for f in outcome.failed_refunds],
            )
            await self._event_bus.publish(
                AttendanceRefundPartiallyFailed(
                    attendance_id=attendance.id,
                    platform_event_id=attendance.event_id,
                    user_id=attendance.user_id,
                    refunded_payment_ids=tuple(outcome.refunded_payment_ids),
                    failed_payment_ids=tuple(
                        f.payment_id for f in outcome.failed_refunds
                    ),
                )
            )

        return Success(value=outcome)

    async def _refund(self, payment: Payment, reason: str | None) -> RefundFailure | None:
        try:
            result = await self._refund_handler.handle(
                RefundPayment(payment_id=payment.id, reason=reason)
            )
        except Exception as e:
            self._logger.error(
                "Refund raised during attendance cancellation",
                error=e,
                payment_id=str(payment.id),
            )
            return RefundFailure(
                payment_id=payment.id,
                code=ErrorCode.PAYMENT_PROCESSOR_ERROR.value,
                message=str(e) or type(e).__name__,
            )

        match result:
            case Success():
                return None
            case Failure(error=error):
                return RefundFailure(
                    payment_id=payment.id,
                    code=error.code.value,
                    message=error.message,
                )
