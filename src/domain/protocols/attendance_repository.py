"""Attendance repository protocol.

Defines the interface for attendance persistence operations.
"""

from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from src.domain.entities.attendance import Attendance
from src.domain.enums.attendance_status import AttendanceStatus


@dataclass(frozen=True, kw_only=True)
class AttendancePage:
    """One page of attendances plus the unpaginated total."""

    attendances: list[Attendance] = field(default_factory=list)
    total: int = 0


class AttendanceRepository(Protocol):
    """Protocol for attendance persistence operations.

    Infrastructure layer provides concrete implementations (e.g., PostgreSQL).

    **Design Principles**:
    - Read methods return domain entities (Attendance), not database models
    - Attendances are never deleted; cancellation is a status change
    - At most one non-cancelled attendance per (event_id, user_id); the
      storage layer enforces it and ``add`` reports a lost race
    - Status changes are persisted with compare-and-set on the previous
      status (``save_transition``) so a concurrent writer cannot be overwritten
    """

    async def find_by_id(self, attendance_id: UUID) -> Attendance | None:
        """Find attendance by ID.

        Returns:
            Attendance entity if found, None otherwise.
        """
        ...

    async def find_by_event_id(self, event_id: UUID) -> list[Attendance]:
        """Find all attendances of an event, oldest first."""
        ...

    async def find_by_user_id(self, user_id: UUID) -> list[Attendance]:
        """Find all attendances of a user, oldest first."""
        ...

    async def find_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> Attendance | None:
        """Find the most recent attendance for the pair, cancelled or not.

        Returns:
            Active attendance if one exists, otherwise the latest cancelled
            one, otherwise None.
        """
        ...

    async def find_active(self, event_id: UUID, user_id: UUID) -> Attendance | None:
        """Find the non-cancelled attendance for the pair, if any."""
        ...

    async def is_registered(self, event_id: UUID, user_id: UUID) -> bool:
        """Check whether the user holds an active attendance for the event."""
        ...

    async def get_attendance_status(
        self, event_id: UUID, user_id: UUID
    ) -> AttendanceStatus | None:
        """Status of the latest attendance for the pair, None if never registered."""
        ...

    async def add(self, attendance: Attendance) -> bool:
        """Insert a new attendance.

        Returns:
            True if inserted, False if another active attendance for the same
            (event_id, user_id) already exists.
        """
        ...

    async def save(self, attendance: Attendance) -> None:
        """Persist field changes of an existing attendance (notes, timestamps)."""
        ...

    async def save_transition(
        self, attendance: Attendance, expected_status: AttendanceStatus
    ) -> bool:
        """Persist a status change only if the stored status is unchanged.

        Args:
            attendance: Entity already moved to its new status.
            expected_status: Status the entity had when it was read.

        Returns:
            True if written, False if the stored status no longer matches
            ``expected_status`` (concurrent modification) or the write
            would create a second active attendance for the pair.
        """
        ...

    async def find_with_pagination(
        self,
        page: int,
        limit: int,
        event_id: UUID | None = None,
        user_id: UUID | None = None,
    ) -> AttendancePage:
        """Search attendances, newest first.

        Args:
            page: 1-based page number.
            limit: Page size.
            event_id: Optional event filter.
            user_id: Optional user filter.

        Returns:
            AttendancePage with the requested slice and the total match count.
        """
        ...
