"""User database model (platform directory, read by the dashboard).

Only the fields the lifecycle service reads are mapped; account
management lives elsewhere on the platform.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model.

    Fields:
        email: Login email
        display_name: Name shown for organizers (nullable)
        last_login_at: Last successful login (nullable)
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
