"""Shared lookup and validation steps of the attendance command handlers."""

from uuid import UUID

from src.application.errors.lifecycle_errors import attendance_not_found
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import validate_required
from src.domain.entities.attendance import Attendance
from src.domain.protocols.attendance_repository import AttendanceRepository


def validate_event_and_user(
    event_id: UUID | None, user_id: UUID | None
) -> Result[tuple[UUID, UUID], ValidationError]:
    """Require both identifiers of an (event, user) pair."""
    for value, field_name in ((event_id, "event_id"), (user_id, "user_id")):
        match validate_required(value, field_name):
            case Failure(error=error):
                return Failure(error=error)
    assert event_id is not None and user_id is not None
    return Success(value=(event_id, user_id))


async def load_latest_attendance(
    repo: AttendanceRepository,
    event_id: UUID | None,
    user_id: UUID | None,
) -> Result[Attendance, DomainError]:
    """Validate the pair and fetch its latest attendance.

    Returns:
        Success(Attendance): Active attendance, else the latest cancelled one.
        Failure(ValidationError): Missing identifier.
        Failure(NotFoundError): The user never registered for the event.
    """
    match validate_event_and_user(event_id, user_id):
        case Failure(error=error):
            return Failure(error=error)
        case Success(value=(valid_event_id, valid_user_id)):
            pass

    attendance = await repo.find_by_event_and_user(valid_event_id, valid_user_id)
    if attendance is None:
        return Failure(
            error=attendance_not_found(event_id=valid_event_id, user_id=valid_user_id)
        )
    return Success(value=attendance)
