"""Revenue and growth aggregation.

Pure functions shared by the payment statistics, total revenue and admin
dashboard query handlers. Every revenue figure counts COMPLETED payments
only, in a single reporting currency.

Usage:
    currency = reporting_currency(payments, default=Currency.EUR)
    total, count = completed_revenue(payments, currency)
    growth = revenue_by_period(payments, currency)
"""

from collections.abc import Callable, Iterable
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from src.application.dtos.dashboard_dtos import CategoryStats, OrganizerStats, PeriodCount
from src.domain.entities.event_summary import EventSummary
from src.domain.entities.payment import Payment
from src.domain.enums.currency import Currency
from src.domain.enums.payment_status import PaymentStatus


def month_key(moment: datetime) -> str:
    """Bucket key for monthly series (``YYYY-MM``).

    Lexicographic order of these keys is chronological order.
    """
    return moment.strftime("%Y-%m")


def count_by_month(timestamps: Iterable[datetime]) -> list[PeriodCount]:
    """Count timestamps per ``YYYY-MM`` bucket, ascending by bucket."""
    counts: dict[str, int] = {}
    for moment in timestamps:
        key = month_key(moment)
        counts[key] = counts.get(key, 0) + 1
    return [PeriodCount(period=key, count=counts[key]) for key in sorted(counts)]


def revenue_payments(payments: Iterable[Payment], currency: Currency) -> list[Payment]:
    """Completed payments expressed in ``currency``."""
    return [
        payment
        for payment in payments
        if payment.status.counts_as_revenue and payment.currency == currency
    ]


def reporting_currency(payments: Iterable[Payment], default: Currency) -> Currency:
    """Currency of the earliest completed payment, ``default`` when none."""
    completed = [p for p in payments if p.status == PaymentStatus.COMPLETED]
    if not completed:
        return default
    return min(completed, key=lambda p: p.created_at).currency


def completed_revenue(
    payments: Iterable[Payment], currency: Currency
) -> tuple[Decimal, int]:
    """Sum and count of completed payments in ``currency``.

    Returns:
        tuple: (total amount, number of payments).
    """
    selected = revenue_payments(payments, currency)
    total = sum((p.amount.amount for p in selected), Decimal("0"))
    return total, len(selected)


def average(total: Decimal, count: int) -> Decimal:
    """Average rounded to cents; zero when there is nothing to average."""
    if count == 0:
        return Decimal("0")
    return (total / count).quantize(Decimal("0.01"))


def revenue_by_period(
    payments: Iterable[Payment],
    currency: Currency,
    key: Callable[[datetime], str] = month_key,
) -> dict[str, Decimal]:
    """Completed revenue per bucket of ``created_at``, ascending by key."""
    buckets: dict[str, Decimal] = {}
    for payment in revenue_payments(payments, currency):
        bucket = key(payment.created_at)
        buckets[bucket] = buckets.get(bucket, Decimal("0")) + payment.amount.amount
    return {bucket: buckets[bucket] for bucket in sorted(buckets)}


def rank_top_organizers(
    events: Iterable[EventSummary],
    payments: Iterable[Payment],
    currency: Currency,
    limit: int,
) -> list[OrganizerStats]:
    """Group events by organizer and rank organizers by revenue.

    Organizers keep the order in which they are first encountered in
    ``events``; the sort is stable and strictly by descending revenue, so
    ties stay in encounter order.

    Args:
        events: Events to group.
        payments: Payments used for revenue (completed, in ``currency``).
        currency: Reporting currency.
        limit: Maximum number of organizers returned.

    Returns:
        list[OrganizerStats]: At most ``limit`` organizers.
    """
    revenue_by_event: dict[UUID, Decimal] = {}
    for payment in revenue_payments(payments, currency):
        revenue_by_event[payment.event_id] = (
            revenue_by_event.get(payment.event_id, Decimal("0")) + payment.amount.amount
        )

    grouped: dict[UUID, list[EventSummary]] = {}
    names: dict[UUID, str | None] = {}
    for event in events:
        grouped.setdefault(event.organizer_id, []).append(event)
        if names.get(event.organizer_id) is None:
            names[event.organizer_id] = event.organizer_name

    organizers = [
        OrganizerStats(
            organizer_id=organizer_id,
            name=names.get(organizer_id) or f"Organizer {organizer_id}",
            events_count=len(organizer_events),
            attendees_count=sum(e.attendees_count for e in organizer_events),
            revenue=sum(
                (revenue_by_event.get(e.id, Decimal("0")) for e in organizer_events),
                Decimal("0"),
            ),
        )
        for organizer_id, organizer_events in grouped.items()
    ]
    organizers.sort(key=lambda organizer: organizer.revenue, reverse=True)
    return organizers[:limit]


def categories_distribution(events: Iterable[EventSummary]) -> list[CategoryStats]:
    """Events and attendees per category, by descending event count.

    Uncategorized events are left out. Ties keep encounter order.
    """
    event_counts: dict[UUID, int] = {}
    attendee_counts: dict[UUID, int] = {}
    for event in events:
        if event.category_id is None:
            continue
        event_counts[event.category_id] = event_counts.get(event.category_id, 0) + 1
        attendee_counts[event.category_id] = (
            attendee_counts.get(event.category_id, 0) + event.attendees_count
        )

    categories = [
        CategoryStats(
            category_id=category_id,
            events_count=count,
            attendees_count=attendee_counts[category_id],
        )
        for category_id, count in event_counts.items()
    ]
    categories.sort(key=lambda category: category.events_count, reverse=True)
    return categories
