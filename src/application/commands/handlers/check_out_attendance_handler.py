"""Check-out handler.

Moves the user's attendance CHECKED_IN → CHECKED_OUT and stamps
check_out_time. The updated entity is returned directly, so callers see
their own write without re-reading.
"""

from src.application.commands.attendance_commands import CheckOutAttendance
from src.application.commands.handlers.attendance_lookup import load_latest_attendance
from src.application.dtos.attendance_dtos import AttendanceResult
from src.application.errors.lifecycle_errors import (
    attendance_concurrently_modified,
    invalid_attendance_state,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events.attendance_events import AttendanceCheckedOut
from src.domain.protocols.attendance_repository import AttendanceRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class CheckOutAttendanceHandler:
    """Handler for CheckOutAttendance command."""

    def __init__(
        self,
        attendance_repo: AttendanceRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._attendance_repo = attendance_repo
        self._event_bus = event_bus

    async def handle(
        self, cmd: CheckOutAttendance
    ) -> Result[AttendanceResult, DomainError]:
        """Handle check-out command.

        Returns:
            Success(AttendanceResult): Checked-out attendance.
            Failure(NotFoundError): User never registered for the event.
            Failure(InvalidStateError): Attendance is not CHECKED_IN.
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
        match attendance.check_out():
            case Failure(error=message):
                return Failure(
                    error=invalid_attendance_state(message, previous_status, "check_out")
                )

        if not await self._attendance_repo.save_transition(attendance, previous_status):
            return Failure(error=attendance_concurrently_modified(attendance.id))

        await self._event_bus.publish(
            AttendanceCheckedOut(
                attendance_id=attendance.id,
                platform_event_id=attendance.event_id,
                user_id=attendance.user_id,
            )
        )
        return Success(value=AttendanceResult.from_entity(attendance))
