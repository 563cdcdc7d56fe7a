"""Payment queries for CQRS read operations.

Includes the read-side revenue aggregations. Raw enum strings are parsed
fail-closed by the handlers.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetPayment:
    """Query to retrieve a single payment by ID."""

    payment_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListUserPayments:
    """Query to list a user's payments, newest first."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListEventPayments:
    """Query to list an event's payments, newest first."""

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class SearchPayments:
    """Filter payments. Every criterion is optional; bounds are inclusive."""

    user_id: UUID | None = None
    event_id: UUID | None = None
    status: str | None = None
    provider: str | None = None
    payment_method: str | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class CheckPaymentStatus:
    """Ask the processor for the remote status of a payment (no mutation)."""

    payment_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetPaymentStats:
    """Payment statistics over an optional creation-date window.

    Revenue figures include completed payments only.
    """

    start_date: datetime | None = None
    end_date: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class GetTotalRevenue:
    """Total revenue over a timeframe ending now.

    Attributes:
        timeframe: One of daily, weekly, monthly, yearly, all.
    """

    timeframe: str = "all"
