"""Attendance handler result DTOs.

DTOs keep domain entities from leaking into the presentation layer.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.entities.attendance import Attendance


@dataclass
class AttendanceResult:
    """Single attendance result.

    Attributes:
        id: Attendance identifier.
        event_id: Event FK.
        user_id: User FK.
        status: Status value (e.g. "checked_in").
        check_in_time: Check-in timestamp or None.
        check_out_time: Check-out timestamp or None.
        notes: Notes or None.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    event_id: UUID
    user_id: UUID
    status: str
    check_in_time: datetime | None
    check_out_time: datetime | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, attendance: Attendance) -> "AttendanceResult":
        return cls(
            id=attendance.id,
            event_id=attendance.event_id,
            user_id=attendance.user_id,
            status=attendance.status.value,
            check_in_time=attendance.check_in_time,
            check_out_time=attendance.check_out_time,
            notes=attendance.notes,
            created_at=attendance.created_at,
            updated_at=attendance.updated_at,
        )


@dataclass
class AttendanceListResult:
    """List of attendances with pagination data.

    For unpaginated lists ``page`` is 1 and ``limit`` equals ``total``.
    """

    attendances: list[AttendanceResult] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 0

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 1
        return max(1, -(-self.total // self.limit))


@dataclass
class AttendanceStatusResult:
    """Registration status of a user for an event."""

    event_id: UUID
    user_id: UUID
    status: str | None
    is_registered: bool


@dataclass(frozen=True, kw_only=True)
class RefundFailure:
    """A payment the cancellation saga could not refund.

    Attributes:
        payment_id: Payment left unrefunded.
        code: Machine-readable error code.
        message: Error message.
    """

    payment_id: UUID
    code: str
    message: str


@dataclass
class CancellationOutcome:
    """Result of cancelling an attendance and refunding its payments.

    Attributes:
        attendance: The cancelled attendance.
        refunded_payment_ids: Payments refunded by this operation.
        failed_refunds: Payments whose refund failed.
    """

    attendance: AttendanceResult
    refunded_payment_ids: list[UUID] = field(default_factory=list)
    failed_refunds: list[RefundFailure] = field(default_factory=list)

    @property
    def fully_refunded(self) -> bool:
        return not self.failed_refunds
