"""Read-only view of an event, as needed by dashboard aggregation.

Events are owned by the surrounding platform; the lifecycle engine only
reads these summaries through EventCatalogProtocol.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class EventSummary:
    """Event fields used by growth, organizer and category statistics.

    Attributes:
        id: Event identifier.
        title: Event title.
        organizer_id: Organizing user.
        organizer_name: Display name of the organizer, when known.
        category_id: Category the event belongs to, when categorized.
        start_date: When the event starts.
        created_at: When the event was created.
        attendees_count: Number of registered attendees.
    """

    id: UUID
    title: str
    organizer_id: UUID
    start_date: datetime
    created_at: datetime
    organizer_name: str | None = None
    category_id: UUID | None = None
    attendees_count: int = 0
