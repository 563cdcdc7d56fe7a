"""Timeframes accepted by the total revenue query."""

from calendar import monthrange
from datetime import datetime, timedelta
from enum import Enum


def _months_before(moment: datetime, months: int) -> datetime:
    """Same time ``months`` earlier, clamped to the last day of that month."""
    index = moment.year * 12 + moment.month - 1 - months
    year, month = divmod(index, 12)
    month += 1
    day = min(moment.day, monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class RevenueTimeframe(str, Enum):
    """Window over which revenue is summed, ending at the query time."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ALL = "all"

    def date_range(self, now: datetime) -> tuple[datetime | None, datetime]:
        """Compute the (start, end) window for this timeframe.

        ``DAILY`` starts at midnight today and ``ALL`` has no lower bound.
        The other windows roll back from ``now``: seven days, one month,
        one year. A month step that lands past the end of a shorter month
        is clamped to its last day (Mar 31 -> Feb 28).

        Args:
            now: Reference time (end of the window).

        Returns:
            tuple: (start or None, end).
        """
        match self:
            case RevenueTimeframe.DAILY:
                return now.replace(hour=0, minute=0, second=0, microsecond=0), now
            case RevenueTimeframe.WEEKLY:
                return now - timedelta(days=7), now
            case RevenueTimeframe.MONTHLY:
                return _months_before(now, 1), now
            case RevenueTimeframe.YEARLY:
                return _months_before(now, 12), now
            case RevenueTimeframe.ALL:
                return None, now

    def segment_key(self, moment: datetime) -> str:
        """Bucket key used for the revenue breakdown of this timeframe.

        Daily windows break down by hour, weekly and monthly by day,
        yearly and all-time by month (``YYYY-MM``).
        """
        match self:
            case RevenueTimeframe.DAILY:
                return moment.strftime("%Y-%m-%d %H:00")
            case RevenueTimeframe.WEEKLY | RevenueTimeframe.MONTHLY:
                return moment.strftime("%Y-%m-%d")
            case RevenueTimeframe.YEARLY | RevenueTimeframe.ALL:
                return moment.strftime("%Y-%m")

    @classmethod
    def parse(cls, value: "str | RevenueTimeframe") -> "RevenueTimeframe":
        """Parse a raw timeframe string.

        Raises:
            ValueError: If value is not a known timeframe.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for timeframe in cls:
            if timeframe.value == normalized:
                return timeframe
        raise ValueError(f"Invalid revenue timeframe: {value!r}")
