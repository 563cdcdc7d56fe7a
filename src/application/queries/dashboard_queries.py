"""Dashboard queries (derived read models computed on demand)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetAdminDashboard:
    """Platform-wide statistics for administrators.

    Attributes:
        top_organizers_limit: Number of organizers to return, None for the
            configured default.
    """

    top_organizers_limit: int | None = None
