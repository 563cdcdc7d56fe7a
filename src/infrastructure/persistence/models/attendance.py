"""Attendance database model.

Architecture:
    - One row per registration; cancelled rows are kept
    - Status stored as lowercase string
    - Partial unique index allows at most one non-cancelled row per
      (event_id, user_id); a concurrent duplicate registration fails at insert
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Index, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Attendance(BaseMutableModel):
    """Attendance model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        event_id: Event the user registered for
        user_id: Registered user
        status: registered, checked_in, checked_out, cancelled
        check_in_time: Set by check-in
        check_out_time: Set by check-out
        notes: Free-form notes (max 500 characters)

    Indexes:
        - ix_attendances_event_id / ix_attendances_user_id: FK lookups
        - uq_attendances_active_event_user: Partial unique (event_id, user_id)
          where status != 'cancelled'
    """

    __tablename__ = "attendances"

    event_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="registered",
        comment="registered, checked_in, checked_out, cancelled",
    )

    check_in_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    check_out_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)

    __table_args__ = (
        Index(
            "uq_attendances_active_event_user",
            "event_id",
            "user_id",
            unique=True,
            postgresql_where=text("status <> 'cancelled'"),
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<Attendance(id={self.id}, event_id={self.event_id}, "
            f"user_id={self.user_id}, status={self.status})>"
        )
