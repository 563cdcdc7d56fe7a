"""Read-only adapters over the platform's events and users tables.

Implement EventCatalogProtocol and UserDirectoryProtocol for the admin
dashboard. Attendee counts exclude cancelled attendances.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.event_summary import EventSummary
from src.domain.entities.user_summary import UserSummary
from src.domain.enums.attendance_status import AttendanceStatus
from src.infrastructure.persistence.models.attendance import (
    Attendance as AttendanceModel,
)
from src.infrastructure.persistence.models.event import Event as EventModel
from src.infrastructure.persistence.models.user import User as UserModel
from src.infrastructure.persistence.repositories.attendance_repository import as_utc


class EventCatalogRepository:
    """SQLAlchemy implementation of EventCatalogProtocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_events(self) -> list[EventSummary]:
        """Every event with organizer name and active attendee count, oldest first."""
        attendees = (
            select(
                AttendanceModel.event_id,
                func.count(AttendanceModel.id).label("attendees_count"),
            )
            .where(AttendanceModel.status != AttendanceStatus.CANCELLED.value)
            .group_by(AttendanceModel.event_id)
            .subquery()
        )
        stmt = (
            select(
                EventModel,
                UserModel.display_name,
                func.coalesce(attendees.c.attendees_count, 0),
            )
            .outerjoin(UserModel, UserModel.id == EventModel.organizer_id)
            .outerjoin(attendees, attendees.c.event_id == EventModel.id)
            .order_by(EventModel.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [
            EventSummary(
                id=event.id,
                title=event.title,
                organizer_id=event.organizer_id,
                organizer_name=organizer_name,
                category_id=event.category_id,
                start_date=as_utc(event.start_date),  # type: ignore[arg-type]
                created_at=as_utc(event.created_at),  # type: ignore[arg-type]
                attendees_count=int(attendees_count),
            )
            for event, organizer_name, attendees_count in result.all()
        ]


class UserDirectoryRepository:
    """SQLAlchemy implementation of UserDirectoryProtocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_users(self) -> list[UserSummary]:
        stmt = select(UserModel).order_by(UserModel.created_at.asc())
        result = await self.session.execute(stmt)
        return [
            UserSummary(
                id=user.id,
                created_at=as_utc(user.created_at),  # type: ignore[arg-type]
                last_login_at=as_utc(user.last_login_at),
            )
            for user in result.scalars().all()
        ]
