"""Admin dashboard response schema."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos.dashboard_dtos import AdminDashboardResult


class PeriodCountResponse(BaseModel):
    period: str = Field(..., examples=["2026-03"])
    count: int


class PeriodAmountResponse(BaseModel):
    period: str = Field(..., examples=["2026-03"])
    amount: Decimal


class OrganizerStatsResponse(BaseModel):
    organizer_id: UUID
    name: str
    events_count: int
    attendees_count: int
    revenue: Decimal


class CategoryStatsResponse(BaseModel):
    category_id: UUID
    events_count: int
    attendees_count: int


class AdminDashboardResponse(BaseModel):
    """Platform-wide statistics for administrators.

    Growth series cover the last twelve months (oldest first). Revenue
    figures include completed payments in ``currency`` only.
    """

    users_count: int
    new_users_this_month: int
    active_users_this_month: int
    events_count: int
    new_events_this_month: int
    upcoming_events_count: int
    total_revenue: Decimal
    revenue_this_month: Decimal
    currency: str
    user_growth: list[PeriodCountResponse]
    event_growth: list[PeriodCountResponse]
    revenue_growth: list[PeriodAmountResponse]
    top_organizers: list[OrganizerStatsResponse]
    categories_distribution: list[CategoryStatsResponse]

    @classmethod
    def from_dto(cls, dto: AdminDashboardResult) -> "AdminDashboardResponse":
        """Convert application DTO to response schema."""
        return cls(
            users_count=dto.users_count,
            new_users_this_month=dto.new_users_this_month,
            active_users_this_month=dto.active_users_this_month,
            events_count=dto.events_count,
            new_events_this_month=dto.new_events_this_month,
            upcoming_events_count=dto.upcoming_events_count,
            total_revenue=dto.total_revenue,
            revenue_this_month=dto.revenue_this_month,
            currency=dto.currency,
            user_growth=[
                PeriodCountResponse(period=p.period, count=p.count)
                for p in dto.user_growth
            ],
            event_growth=[
                PeriodCountResponse(period=p.period, count=p.count)
                for p in dto.event_growth
            ],
            revenue_growth=[
                PeriodAmountResponse(period=p.period, amount=p.amount)
                for p in dto.revenue_growth
            ],
            top_organizers=[
                OrganizerStatsResponse(
                    organizer_id=o.organizer_id,
                    name=o.name,
                    events_count=o.events_count,
                    attendees_count=o.attendees_count,
                    revenue=o.revenue,
                )
                for o in dto.top_organizers
            ],
            categories_distribution=[
                CategoryStatsResponse(
                    category_id=c.category_id,
                    events_count=c.events_count,
                    attendees_count=c.attendees_count,
                )
                for c in dto.categories_distribution
            ],
        )
