"""Check-in handler.

Moves the user's attendance REGISTERED → CHECKED_IN and stamps
check_in_time. Persisted with compare-and-set on the previous status.
"""

from src.application.commands.attendance_commands import CheckInAttendance
from src.application.commands.handlers.attendance_lookup import load_latest_attendance
from src.application.dtos.attendance_dtos import AttendanceResult
from src.application.errors.lifecycle_errors import (
    attendance_concurrently_modified,
    invalid_attendance_state,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events.attendance_events import AttendanceCheckedIn
from src.domain.protocols.attendance_repository import AttendanceRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class CheckInAttendanceHandler:
    """Handler for CheckInAttendance command."""

    def __init__(
        self,
        attendance_repo: AttendanceRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._attendance_repo = attendance_repo
        self._event_bus = event_bus

    async def handle(
        self, cmd: CheckInAttendance
    ) -> Result[AttendanceResult, DomainError]:
        """Handle check-in command.

        Returns:
            Success(AttendanceResult): Checked-in attendance.
            Failure(ValidationError): Missing identifier.
            Failure(NotFoundError): User never registered for the event.
            Failure(InvalidStateError): Attendance is not REGISTERED.
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
        match attendance.check_in():
            case Failure(error=message):
                return Failure(
                    error=invalid_attendance_state(message, previous_status, "check_in")
                )

        if not await self._attendance_repo.save_transition(attendance, previous_status):
            return Failure(error=attendance_concurrently_modified(attendance.id))

        await self._event_bus.publish(
            AttendanceCheckedIn(
                attendance_id=attendance.id,
                platform_event_id=attendance.event_id,
                user_id=attendance.user_id,
            )
        )
        return Success(value=AttendanceResult.from_entity(attendance))
