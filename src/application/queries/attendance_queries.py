"""Attendance queries for CQRS read operations.

Queries are immutable dataclasses with question-like names that describe
what information is being requested. Handlers never mutate state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetAttendance:
    """Query to retrieve a single attendance by ID."""

    attendance_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListEventAttendances:
    """Query to list every attendance of an event (cancelled included)."""

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListUserAttendances:
    """Query to list every attendance of a user (cancelled included)."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetAttendanceStatus:
    """Query the status of a user's latest attendance for an event."""

    event_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class SearchAttendances:
    """Paginated attendance search, newest first.

    Attributes:
        page: 1-based page number.
        limit: Page size (bounded by settings.max_page_size).
        event_id: Optional event filter.
        user_id: Optional user filter.
    """

    page: int = 1
    limit: int = 10
    event_id: UUID | None = None
    user_id: UUID | None = None
