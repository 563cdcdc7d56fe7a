"""Admin dashboard result DTOs."""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class PeriodCount:
    """Number of records created in a ``YYYY-MM`` month."""

    period: str
    count: int


@dataclass(frozen=True, kw_only=True)
class PeriodAmount:
    """Revenue booked in a ``YYYY-MM`` month."""

    period: str
    amount: Decimal


@dataclass(frozen=True, kw_only=True)
class OrganizerStats:
    """Aggregates for one organizer."""

    organizer_id: UUID
    name: str
    events_count: int
    attendees_count: int
    revenue: Decimal


@dataclass(frozen=True, kw_only=True)
class CategoryStats:
    """Aggregates for one event category."""

    category_id: UUID
    events_count: int
    attendees_count: int


@dataclass
class AdminDashboardResult:
    """Platform-wide statistics for administrators."""

    users_count: int
    new_users_this_month: int
    active_users_this_month: int
    events_count: int
    new_events_this_month: int
    upcoming_events_count: int
    total_revenue: Decimal
    revenue_this_month: Decimal
    currency: str
    user_growth: list[PeriodCount] = field(default_factory=list)
    event_growth: list[PeriodCount] = field(default_factory=list)
    revenue_growth: list[PeriodAmount] = field(default_factory=list)
    top_organizers: list[OrganizerStats] = field(default_factory=list)
    categories_distribution: list[CategoryStats] = field(default_factory=list)
