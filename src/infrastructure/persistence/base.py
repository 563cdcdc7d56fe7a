"""Declarative bases for the lifecycle tables.

ORM models are an infrastructure detail: domain entities never inherit from
them, repositories map between the two.

    BaseModel (id, created_at)
        └── BaseMutableModel (+ updated_at)
            ├── Attendance
            ├── Payment
            ├── Event
            └── User

Repositories write the entity timestamps explicitly; the server defaults
only cover rows inserted by hand or by other services.
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """UUIDv7 primary key and creation time shared by every table."""

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class BaseMutableModel(BaseModel):
    """Base for rows that change after insert."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
