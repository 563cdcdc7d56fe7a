"""Logging event handler for domain events.

Structured logging for every attendance and payment event in the event
registry. Method names follow ``handle_{workflow_name}_{phase}`` so the
container can subscribe them from the registry.

Log Levels:
    - INFO: SUCCEEDED events (normal operations)
    - WARNING: FAILED events and forced status overrides

Structured Fields:
    - event_id: UUID of the domain event, for correlation and deduplication
    - occurred_at: ISO 8601 timestamp (UTC)
    - attendance_id / payment_id, platform_event_id, user_id
    - reason, amount, currency (when available)
"""

from src.domain.events.attendance_events import (
    AttendanceCancelled,
    AttendanceCheckedIn,
    AttendanceCheckedOut,
    AttendanceRegistered,
    AttendanceUpdated,
)
from src.domain.events.payment_events import (
    AttendanceRefundPartiallyFailed,
    PaymentCancelled,
    PaymentCompleted,
    PaymentCreated,
    PaymentFailed,
    PaymentRefunded,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> event_bus.subscribe(PaymentFailed, handler.handle_payment_processing_failed)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    # =========================================================================
    # Attendance Event Handlers
    # =========================================================================

    async def handle_attendance_registration_succeeded(
        self,
        event: AttendanceRegistered,
    ) -> None:
        self._logger.info(
            "attendance_registered",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attendance_id=str(event.attendance_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
        )

    async def handle_attendance_check_in_succeeded(
        self,
        event: AttendanceCheckedIn,
    ) -> None:
        self._logger.info(
            "attendance_checked_in",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attendance_id=str(event.attendance_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
        )

    async def handle_attendance_check_out_succeeded(
        self,
        event: AttendanceCheckedOut,
    ) -> None:
        self._logger.info(
            "attendance_checked_out",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attendance_id=str(event.attendance_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
        )

    async def handle_attendance_cancellation_succeeded(
        self,
        event: AttendanceCancelled,
    ) -> None:
        self._logger.info(
            "attendance_cancelled",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attendance_id=str(event.attendance_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
            previous_status=event.previous_status,
        )

    async def handle_attendance_update_succeeded(
        self,
        event: AttendanceUpdated,
    ) -> None:
        """Log attendance update; forced overrides are logged at WARNING level."""
        log = self._logger.warning if event.forced else self._logger.info
        log(
            "attendance_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attendance_id=str(event.attendance_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
            previous_status=event.previous_status,
            new_status=event.new_status,
            forced=event.forced,
        )

    # =========================================================================
    # Payment Event Handlers
    # =========================================================================

    async def handle_payment_creation_succeeded(
        self,
        event: PaymentCreated,
    ) -> None:
        self._logger.info(
            "payment_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            payment_id=str(event.payment_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
            amount=str(event.amount),
            currency=event.currency,
            provider=event.provider,
        )

    async def handle_payment_processing_succeeded(
        self,
        event: PaymentCompleted,
    ) -> None:
        self._logger.info(
            "payment_completed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            payment_id=str(event.payment_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
            amount=str(event.amount),
            currency=event.currency,
            provider_payment_id=event.provider_payment_id,
        )

    async def handle_payment_processing_failed(
        self,
        event: PaymentFailed,
    ) -> None:
        self._logger.warning(
            "payment_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            payment_id=str(event.payment_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
            reason=event.reason,
        )

    async def handle_payment_refund_succeeded(
        self,
        event: PaymentRefunded,
    ) -> None:
        self._logger.info(
            "payment_refunded",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            payment_id=str(event.payment_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
            amount=str(event.amount),
            currency=event.currency,
            reason=event.reason,
        )

    async def handle_payment_cancellation_succeeded(
        self,
        event: PaymentCancelled,
    ) -> None:
        self._logger.info(
            "payment_cancelled",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            payment_id=str(event.payment_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
        )

    async def handle_attendance_refund_failed(
        self,
        event: AttendanceRefundPartiallyFailed,
    ) -> None:
        self._logger.warning(
            "attendance_refund_partially_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            attendance_id=str(event.attendance_id),
            platform_event_id=str(event.platform_event_id),
            user_id=str(event.user_id),
            refunded_payment_ids=[str(pid) for pid in event.refunded_payment_ids],
            failed_payment_ids=[str(pid) for pid in event.failed_payment_ids],
        )
