"""Event database model (platform catalog, read by the dashboard)."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Event(BaseMutableModel):
    """Event model.

    Fields:
        title: Event title
        organizer_id: Organizing user (users.id)
        category_id: Event category (nullable)
        start_date: When the event starts
    """

    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    organizer_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    category_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True, index=True)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title})>"
