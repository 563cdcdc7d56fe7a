"""Register attendance handler.

Flow:
1. Validate identifiers and notes
2. Reject if the user already holds an active attendance for the event
3. Create REGISTERED attendance
4. Insert (storage re-checks uniqueness; a lost race is a conflict)
5. Publish AttendanceRegistered
6. Return AttendanceResult

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repositories are injected via protocols)
"""

from uuid_extensions import uuid7

from src.application.commands.attendance_commands import RegisterAttendance
from src.application.commands.handlers.attendance_lookup import validate_event_and_user
from src.application.dtos.attendance_dtos import AttendanceResult
from src.application.errors.lifecycle_errors import already_registered
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.core.validation import MAX_TEXT_LENGTH, validate_max_length
from src.domain.entities.attendance import Attendance
from src.domain.events.attendance_events import AttendanceRegistered
from src.domain.protocols.attendance_repository import AttendanceRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class RegisterAttendanceHandler:
    """Handler for RegisterAttendance command."""

    def __init__(
        self,
        attendance_repo: AttendanceRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            attendance_repo: Attendance repository for persistence.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._attendance_repo = attendance_repo
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: RegisterAttendance
    ) -> Result[AttendanceResult, DomainError]:
        """Handle register attendance command.

        Returns:
            Success(AttendanceResult): New REGISTERED attendance.
            Failure(ValidationError): Missing identifier or notes too long.
            Failure(ConflictError): User already registered for the event.
        """
        match validate_event_and_user(cmd.event_id, cmd.user_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=(event_id, user_id)):
                pass

        match validate_max_length(cmd.notes, MAX_TEXT_LENGTH, "notes"):
            case Failure(error=error):
                return Failure(error=error)

        if await self._attendance_repo.find_active(event_id, user_id) is not None:
            self._logger.info(
                "Attendance registration rejected: already registered",
                event_id=str(event_id),
                user_id=str(user_id),
            )
            return Failure(error=already_registered(event_id, user_id))

        attendance = Attendance(
            id=uuid7(),
            event_id=event_id,
            user_id=user_id,
            notes=cmd.notes,
        )

        if not await self._attendance_repo.add(attendance):
            self._logger.warning(
                "Concurrent registration detected at insert",
                event_id=str(event_id),
                user_id=str(user_id),
            )
            return Failure(error=already_registered(event_id, user_id))

        await self._event_bus.publish(
            AttendanceRegistered(
                attendance_id=attendance.id,
                platform_event_id=event_id,
                user_id=user_id,
            )
        )
        return Success(value=AttendanceResult.from_entity(attendance))
