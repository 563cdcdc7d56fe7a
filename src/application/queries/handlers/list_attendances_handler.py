"""Attendance list query handlers.

Handles listing attendances by event, by user, and paginated search.
"""

from src.application.dtos.attendance_dtos import AttendanceListResult, AttendanceResult
from src.application.queries.attendance_queries import (
    ListEventAttendances,
    ListUserAttendances,
    SearchAttendances,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.core.validation import validate_pagination
from src.domain.entities.attendance import Attendance
from src.domain.protocols.attendance_repository import AttendanceRepository


def _unpaginated(attendances: list[Attendance]) -> AttendanceListResult:
    return AttendanceListResult(
        attendances=[AttendanceResult.from_entity(a) for a in attendances],
        total=len(attendances),
        page=1,
        limit=len(attendances),
    )


class ListEventAttendancesHandler:
    """Handler for ListEventAttendances query."""

    def __init__(self, attendance_repo: AttendanceRepository) -> None:
        self._attendance_repo = attendance_repo

    async def handle(
        self, query: ListEventAttendances
    ) -> Result[AttendanceListResult, DomainError]:
        attendances = await self._attendance_repo.find_by_event_id(query.event_id)
        return Success(value=_unpaginated(attendances))


class ListUserAttendancesHandler:
    """Handler for ListUserAttendances query."""

    def __init__(self, attendance_repo: AttendanceRepository) -> None:
        self._attendance_repo = attendance_repo

    async def handle(
        self, query: ListUserAttendances
    ) -> Result[AttendanceListResult, DomainError]:
        attendances = await self._attendance_repo.find_by_user_id(query.user_id)
        return Success(value=_unpaginated(attendances))


class SearchAttendancesHandler:
    """Handler for SearchAttendances query.

    Page size is bounded by ``max_page_size`` (settings.max_page_size).
    """

    def __init__(self, attendance_repo: AttendanceRepository, max_page_size: int) -> None:
        self._attendance_repo = attendance_repo
        self._max_page_size = max_page_size

    async def handle(
        self, query: SearchAttendances
    ) -> Result[AttendanceListResult, DomainError]:
        """Handle SearchAttendances query.

        Returns:
            Success(AttendanceListResult): Requested page (may be empty).
            Failure(ValidationError): page < 1 or limit out of range.
        """
        match validate_pagination(query.page, query.limit, self._max_page_size):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=(page, limit)):
                pass

        result = await self._attendance_repo.find_with_pagination(
            page=page,
            limit=limit,
            event_id=query.event_id,
            user_id=query.user_id,
        )
        return Success(
            value=AttendanceListResult(
                attendances=[AttendanceResult.from_entity(a) for a in result.attendances],
                total=result.total,
                page=page,
                limit=limit,
            )
        )
