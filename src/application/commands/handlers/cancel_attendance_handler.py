"""Cancel attendance handler.

Cancellation is legal from any non-cancelled state, including after
check-out. Cancelling twice is an AlreadyCancelledError.
"""

from src.application.commands.attendance_commands import CancelAttendance
from src.application.commands.handlers.attendance_lookup import load_latest_attendance
from src.application.dtos.attendance_dtos import AttendanceResult
from src.application.errors.lifecycle_errors import (
    already_cancelled,
    attendance_concurrently_modified,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events.attendance_events import AttendanceCancelled
from src.domain.protocols.attendance_repository import AttendanceRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class CancelAttendanceHandler:
    """Handler for CancelAttendance command."""

    def __init__(
        self,
        attendance_repo: AttendanceRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._attendance_repo = attendance_repo
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: CancelAttendance
    ) -> Result[AttendanceResult, DomainError]:
        """Handle cancel attendance command.

        Returns:
            Success(AttendanceResult): Cancelled attendance.
            Failure(NotFoundError): User never registered for the event.
            Failure(AlreadyCancelledError): Latest attendance already cancelled.
            Failure(ConflictError): Attendance changed concurrently.
        """
        match await load_latest_attendance(
            self._attendance_repo, cmd.event_id, cmd.user_id
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=attendance):
                pass

        previous_status = attendance.status
        match attendance.cancel():
            case Failure():
                return Failure(error=already_cancelled(attendance.id))

        if not await self._attendance_repo.save_transition(attendance, previous_status):
            return Failure(error=attendance_concurrently_modified(attendance.id))

        self._logger.info(
            "Attendance cancelled",
            attendance_id=str(attendance.id),
            previous_status=previous_status.value,
        )
        await self._event_bus.publish(
            AttendanceCancelled(
                attendance_id=attendance.id,
                platform_event_id=attendance.event_id,
                user_id=attendance.user_id,
                previous_status=previous_status.value,
            )
        )
        return Success(value=AttendanceResult.from_entity(attendance))
