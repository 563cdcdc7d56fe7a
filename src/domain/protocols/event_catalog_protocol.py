"""Read access to events and users owned by the surrounding platform."""

from typing import Protocol

from src.domain.entities.event_summary import EventSummary
from src.domain.entities.user_summary import UserSummary


class EventCatalogProtocol(Protocol):
    """Read-only access to platform events."""

    async def list_events(self) -> list[EventSummary]:
        """Return every event, oldest first."""
        ...


class UserDirectoryProtocol(Protocol):
    """Read-only access to platform users."""

    async def list_users(self) -> list[UserSummary]:
        """Return every user, oldest first."""
        ...
