"""AttendanceRepository - SQLAlchemy implementation of AttendanceRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Attendance entities and the attendances table.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.attendance import Attendance
from src.domain.enums.attendance_status import AttendanceStatus
from src.domain.protocols.attendance_repository import AttendancePage
from src.infrastructure.persistence.models.attendance import (
    Attendance as AttendanceModel,
)


def as_utc(moment: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps returned by drivers without tz support."""
    if moment is not None and moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


class AttendanceRepository:
    """SQLAlchemy implementation of AttendanceRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AttendanceRepository(session)
        ...     attendance = await repo.find_active(event_id, user_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, attendance_id: UUID) -> Attendance | None:
        stmt = select(AttendanceModel).where(AttendanceModel.id == attendance_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_event_id(self, event_id: UUID) -> list[Attendance]:
        stmt = (
            select(AttendanceModel)
            .where(AttendanceModel.event_id == event_id)
            .order_by(AttendanceModel.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_user_id(self, user_id: UUID) -> list[Attendance]:
        stmt = (
            select(AttendanceModel)
            .where(AttendanceModel.user_id == user_id)
            .order_by(AttendanceModel.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> Attendance | None:
        """Active attendance for the pair, else the most recent cancelled one."""
        active = await self.find_active(event_id, user_id)
        if active is not None:
            return active

        stmt = (
            select(AttendanceModel)
            .where(
                AttendanceModel.event_id == event_id,
                AttendanceModel.user_id == user_id,
            )
            .order_by(AttendanceModel.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_active(self, event_id: UUID, user_id: UUID) -> Attendance | None:
        stmt = select(AttendanceModel).where(
            AttendanceModel.event_id == event_id,
            AttendanceModel.user_id == user_id,
            AttendanceModel.status != AttendanceStatus.CANCELLED.value,
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model is not None else None

    async def is_registered(self, event_id: UUID, user_id: UUID) -> bool:
        return await self.find_active(event_id, user_id) is not None

    async def get_attendance_status(
        self, event_id: UUID, user_id: UUID
    ) -> AttendanceStatus | None:
        attendance = await self.find_by_event_and_user(event_id, user_id)
        return attendance.status if attendance is not None else None

    async def add(self, attendance: Attendance) -> bool:
        """Insert a new attendance.

        The partial unique index rejects a second active row for the pair;
        the insert runs in a savepoint so the session stays usable.

        Returns:
            True if inserted, False on a duplicate active registration.
        """
        try:
            async with self.session.begin_nested():
                self.session.add(self._to_model(attendance))
        except IntegrityError:
            return False
        await self.session.commit()
        return True

    async def save(self, attendance: Attendance) -> None:
        """Persist notes and timestamps of an existing attendance."""
        stmt = (
            update(AttendanceModel)
            .where(AttendanceModel.id == attendance.id)
            .values(**self._columns(attendance))
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def save_transition(
        self, attendance: Attendance, expected_status: AttendanceStatus
    ) -> bool:
        """Compare-and-set write guarded on the stored status.

        Returns:
            True if exactly one row was updated, False if the stored status
            changed meanwhile or the write would duplicate an active row.
        """
        stmt = (
            update(AttendanceModel)
            .where(
                AttendanceModel.id == attendance.id,
                AttendanceModel.status == expected_status.value,
            )
            .values(**self._columns(attendance))
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except IntegrityError:
            return False

        if result.rowcount != 1:
            return False
        await self.session.commit()
        return True

    async def find_with_pagination(
        self,
        page: int,
        limit: int,
        event_id: UUID | None = None,
        user_id: UUID | None = None,
    ) -> AttendancePage:
        conditions = []
        if event_id is not None:
            conditions.append(AttendanceModel.event_id == event_id)
        if user_id is not None:
            conditions.append(AttendanceModel.user_id == user_id)

        count_stmt = select(func.count()).select_from(AttendanceModel).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(AttendanceModel)
            .where(*conditions)
            .order_by(AttendanceModel.created_at.desc())
            .limit(limit)
            .offset((page - 1) * limit)
        )
        result = await self.session.execute(stmt)
        return AttendancePage(
            attendances=[self._to_domain(model) for model in result.scalars().all()],
            total=total,
        )

    def _columns(self, attendance: Attendance) -> dict:
        return {
            "status": attendance.status.value,
            "check_in_time": attendance.check_in_time,
            "check_out_time": attendance.check_out_time,
            "notes": attendance.notes,
            "updated_at": attendance.updated_at,
        }

    def _to_domain(self, model: AttendanceModel) -> Attendance:
        return Attendance(
            id=model.id,
            event_id=model.event_id,
            user_id=model.user_id,
            status=AttendanceStatus(model.status),
            check_in_time=as_utc(model.check_in_time),
            check_out_time=as_utc(model.check_out_time),
            notes=model.notes,
            created_at=as_utc(model.created_at),  # type: ignore[arg-type]
            updated_at=as_utc(model.updated_at),  # type: ignore[arg-type]
        )

    def _to_model(self, entity: Attendance) -> AttendanceModel:
        return AttendanceModel(
            id=entity.id,
            event_id=entity.event_id,
            user_id=entity.user_id,
            status=entity.status.value,
            check_in_time=entity.check_in_time,
            check_out_time=entity.check_out_time,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
