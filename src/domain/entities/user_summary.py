"""Read-only view of a platform user, as needed by dashboard aggregation."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class UserSummary:
    """User fields used by growth and activity statistics."""

    id: UUID
    created_at: datetime
    last_login_at: datetime | None = None
