"""Attendance lookup query handlers.

Architecture:
- Application layer handlers (orchestrate data retrieval)
- Return Result[DTO, DomainError]
- NO domain events (queries are side-effect free)
"""

from src.application.dtos.attendance_dtos import AttendanceResult, AttendanceStatusResult
from src.application.errors.lifecycle_errors import attendance_not_found
from src.application.queries.attendance_queries import GetAttendance, GetAttendanceStatus
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.attendance_repository import AttendanceRepository


class GetAttendanceHandler:
    """Handler for GetAttendance query."""

    def __init__(self, attendance_repo: AttendanceRepository) -> None:
        self._attendance_repo = attendance_repo

    async def handle(
        self, query: GetAttendance
    ) -> Result[AttendanceResult, DomainError]:
        """Handle GetAttendance query.

        Returns:
            Success(AttendanceResult): Attendance found.
            Failure(NotFoundError): Attendance does not exist.
        """
        attendance = await self._attendance_repo.find_by_id(query.attendance_id)
        if attendance is None:
            return Failure(error=attendance_not_found(attendance_id=query.attendance_id))
        return Success(value=AttendanceResult.from_entity(attendance))


class GetAttendanceStatusHandler:
    """Handler for GetAttendanceStatus query.

    Never fails on an unknown pair: a user who never registered simply has
    no status.
    """

    def __init__(self, attendance_repo: AttendanceRepository) -> None:
        self._attendance_repo = attendance_repo

    async def handle(
        self, query: GetAttendanceStatus
    ) -> Result[AttendanceStatusResult, DomainError]:
        status = await self._attendance_repo.get_attendance_status(
            query.event_id, query.user_id
        )
        return Success(
            value=AttendanceStatusResult(
                event_id=query.event_id,
                user_id=query.user_id,
                status=status.value if status is not None else None,
                is_registered=status is not None and status.is_active,
            )
        )
