"""Update attendance handler.

Edits notes and/or status of an attendance addressed by id.

Status changes follow the attendance state machine unless ``force`` is set.
A forced change is an administrative override: it is logged at warning
level and flagged on the AttendanceUpdated event. Even forced, reviving a
cancelled attendance is refused while the user holds another active one
for the same event.
"""

from src.application.commands.attendance_commands import UpdateAttendance
from src.application.dtos.attendance_dtos import AttendanceResult
from src.application.errors.lifecycle_errors import (
    already_registered,
    attendance_concurrently_modified,
    attendance_not_found,
    invalid_attendance_state,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.core.validation import (
    MAX_TEXT_LENGTH,
    validate_enum,
    validate_max_length,
    validate_required,
)
from src.domain.entities.attendance import Attendance
from src.domain.enums.attendance_status import AttendanceStatus
from src.domain.events.attendance_events import AttendanceUpdated
from src.domain.protocols.attendance_repository import AttendanceRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class UpdateAttendanceHandler:
    """Handler for UpdateAttendance command."""

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
        self, cmd: UpdateAttendance
    ) -> Result[AttendanceResult, DomainError]:
        """Handle update attendance command.

        Returns:
            Success(AttendanceResult): Updated attendance.
            Failure(ValidationError): Missing id, notes too long, unknown status.
            Failure(NotFoundError): Attendance does not exist.
            Failure(InvalidStateError): Unforced transition not allowed.
            Failure(ConflictError): Second active attendance or concurrent write.
        """
        match validate_required(cmd.attendance_id, "attendance_id"):
            case Failure(error=error):
                return Failure(error=error)

        match validate_max_length(cmd.notes, MAX_TEXT_LENGTH, "notes"):
            case Failure(error=error):
                return Failure(error=error)

        target: AttendanceStatus | None = None
        if cmd.status is not None:
            match validate_enum(cmd.status, AttendanceStatus, "status"):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=parsed):
                    target = parsed

        assert cmd.attendance_id is not None
        attendance = await self._attendance_repo.find_by_id(cmd.attendance_id)
        if attendance is None:
            return Failure(error=attendance_not_found(attendance_id=cmd.attendance_id))

        previous_status = attendance.status

        if cmd.clear_notes:
            attendance.update_notes(None)
        elif cmd.notes is not None:
            attendance.update_notes(cmd.notes)

        forced = False
        if target is not None and target != previous_status:
            if cmd.force:
                match await self._force_status(attendance, target):
                    case Failure(error=error):
                        return Failure(error=error)
                forced = True
            else:
                match attendance.transition_to(target):
                    case Failure(error=message):
                        return Failure(
                            error=invalid_attendance_state(
                                message, previous_status, f"update_to_{target.value}"
                            )
                        )

        if attendance.status != previous_status:
            if not await self._attendance_repo.save_transition(
                attendance, previous_status
            ):
                return Failure(error=attendance_concurrently_modified(attendance.id))
        else:
            attendance.touch()
            await self._attendance_repo.save(attendance)

        await self._event_bus.publish(
            AttendanceUpdated(
                attendance_id=attendance.id,
                platform_event_id=attendance.event_id,
                user_id=attendance.user_id,
                previous_status=previous_status.value,
                new_status=attendance.status.value,
                forced=forced,
            )
        )
        return Success(value=AttendanceResult.from_entity(attendance))

    async def _force_status(
        self, attendance: Attendance, target: AttendanceStatus
    ) -> Result[None, DomainError]:
        if attendance.status == AttendanceStatus.CANCELLED and target.is_active:
            active = await self._attendance_repo.find_active(
                attendance.event_id, attendance.user_id
            )
            if active is not None and active.id != attendance.id:
                return Failure(
                    error=already_registered(attendance.event_id, attendance.user_id)
                )

        self._logger.warning(
            "Attendance status forced",
            attendance_id=str(attendance.id),
            previous_status=attendance.status.value,
            new_status=target.value,
        )
        attendance.force_status(target)
        return Success(value=None)
