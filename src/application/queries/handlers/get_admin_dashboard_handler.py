"""Admin dashboard query handler.

Computes platform statistics on demand from users, events and payments.
Nothing is cached: two calls over unchanged data return equal results.

"This month" starts at 00:00 UTC on the first day of the current month.
Growth series are ``YYYY-MM`` buckets in ascending order.
"""

from datetime import UTC, datetime

from src.application.dtos.dashboard_dtos import AdminDashboardResult, PeriodAmount
from src.application.queries.dashboard_queries import GetAdminDashboard
from src.application.services.revenue_statistics import (
    categories_distribution,
    completed_revenue,
    count_by_month,
    rank_top_organizers,
    reporting_currency,
    revenue_by_period,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums.currency import Currency
from src.domain.protocols.event_catalog_protocol import (
    EventCatalogProtocol,
    UserDirectoryProtocol,
)
from src.domain.protocols.payment_repository import PaymentRepository


class GetAdminDashboardHandler:
    """Handler for GetAdminDashboard query.

    Dependencies (injected via constructor):
        - EventCatalogProtocol: Platform events
        - UserDirectoryProtocol: Platform users
        - PaymentRepository: Payments for revenue figures
    """

    def __init__(
        self,
        event_catalog: EventCatalogProtocol,
        user_directory: UserDirectoryProtocol,
        payment_repo: PaymentRepository,
        default_currency: Currency,
        default_top_organizers_limit: int = 5,
    ) -> None:
        self._event_catalog = event_catalog
        self._user_directory = user_directory
        self._payment_repo = payment_repo
        self._default_currency = default_currency
        self._default_top_organizers_limit = default_top_organizers_limit

    async def handle(
        self, query: GetAdminDashboard
    ) -> Result[AdminDashboardResult, DomainError]:
        """Handle GetAdminDashboard query.

        Returns:
            Success(AdminDashboardResult): Dashboard figures.
            Failure(ValidationError): top_organizers_limit < 1.
        """
        limit = query.top_organizers_limit or self._default_top_organizers_limit
        if query.top_organizers_limit is not None and query.top_organizers_limit < 1:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="top_organizers_limit must be at least 1",
                    field="top_organizers_limit",
                )
            )

        users = await self._user_directory.list_users()
        events = await self._event_catalog.list_events()
        payments = await self._payment_repo.find_all()

        now = datetime.now(UTC)
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

        currency = reporting_currency(payments, self._default_currency)
        total_revenue, _ = completed_revenue(payments, currency)
        revenue_this_month, _ = completed_revenue(
            (p for p in payments if p.created_at >= month_start), currency
        )

        return Success(
            value=AdminDashboardResult(
                users_count=len(users),
                new_users_this_month=sum(1 for u in users if u.created_at >= month_start),
                active_users_this_month=sum(
                    1
                    for u in users
                    if u.last_login_at is not None and u.last_login_at >= month_start
                ),
                events_count=len(events),
                new_events_this_month=sum(
                    1 for e in events if e.created_at >= month_start
                ),
                upcoming_events_count=sum(1 for e in events if e.start_date >= now),
                total_revenue=total_revenue,
                revenue_this_month=revenue_this_month,
                currency=currency.value,
                user_growth=count_by_month(u.created_at for u in users),
                event_growth=count_by_month(e.created_at for e in events),
                revenue_growth=[
                    PeriodAmount(period=period, amount=amount)
                    for period, amount in revenue_by_period(payments, currency).items()
                ],
                top_organizers=rank_top_organizers(events, payments, currency, limit),
                categories_distribution=categories_distribution(events),
            )
        )
