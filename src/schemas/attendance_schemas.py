"""Attendance request and response schemas.

Pydantic schemas for attendance API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods

Status values arrive as plain strings; handlers reject unknown values.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos.attendance_dtos import (
    AttendanceListResult,
    AttendanceResult,
    AttendanceStatusResult,
    CancellationOutcome,
)


# =============================================================================
# Request Schemas
# =============================================================================


class RegisterAttendanceRequest(BaseModel):
    """Request to register a user for an event."""

    event_id: UUID = Field(..., description="Event to attend")
    user_id: UUID = Field(..., description="Attending user")
    notes: str | None = Field(None, description="Optional notes (max 500 characters)")


class UpdateAttendanceRequest(BaseModel):
    """Partial attendance update.

    Attributes:
        status: New status ("registered", "checked_in", "checked_out", "cancelled").
        notes: New notes.
        clear_notes: Remove the notes.
        force: Administrative override of the transition rules.
    """

    status: str | None = Field(
        None, description="New status", examples=["checked_in"]
    )
    notes: str | None = Field(None, description="New notes")
    clear_notes: bool = Field(False, description="Remove existing notes")
    force: bool = Field(False, description="Bypass transition rules (admin override)")


class CancelAndRefundRequest(BaseModel):
    """Optional body for cancel-and-refund."""

    reason: str | None = Field(None, description="Refund reason")


# =============================================================================
# Response Schemas
# =============================================================================


class AttendanceResponse(BaseModel):
    """Single attendance response."""

    id: UUID = Field(..., description="Attendance unique identifier")
    event_id: UUID = Field(..., description="Event FK")
    user_id: UUID = Field(..., description="User FK")
    status: str = Field(..., description="Attendance status", examples=["registered"])
    check_in_time: datetime | None = Field(None, description="Check-in timestamp")
    check_out_time: datetime | None = Field(None, description="Check-out timestamp")
    notes: str | None = Field(None, description="Notes")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: AttendanceResult) -> "AttendanceResponse":
        """Convert application DTO to response schema.

        Args:
            dto: AttendanceResult from handler.

        Returns:
            AttendanceResponse for API response.
        """
        return cls(
            id=dto.id,
            event_id=dto.event_id,
            user_id=dto.user_id,
            status=dto.status,
            check_in_time=dto.check_in_time,
            check_out_time=dto.check_out_time,
            notes=dto.notes,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class AttendanceListResponse(BaseModel):
    """Attendance list response with pagination data."""

    attendances: list[AttendanceResponse] = Field(..., description="Attendances")
    total: int = Field(..., description="Total matching attendances")
    page: int = Field(..., description="Current page")
    limit: int = Field(..., description="Page size")
    total_pages: int = Field(..., description="Total number of pages")

    @classmethod
    def from_dto(cls, dto: AttendanceListResult) -> "AttendanceListResponse":
        return cls(
            attendances=[AttendanceResponse.from_dto(a) for a in dto.attendances],
            total=dto.total,
            page=dto.page,
            limit=dto.limit,
            total_pages=dto.total_pages,
        )


class AttendanceStatusResponse(BaseModel):
    """Registration status of a user for an event."""

    event_id: UUID
    user_id: UUID
    status: str | None = Field(None, description="Latest status, None when never registered")
    is_registered: bool = Field(..., description="Whether an active registration exists")

    @classmethod
    def from_dto(cls, dto: AttendanceStatusResult) -> "AttendanceStatusResponse":
        return cls(
            event_id=dto.event_id,
            user_id=dto.user_id,
            status=dto.status,
            is_registered=dto.is_registered,
        )


class RefundFailureResponse(BaseModel):
    """A payment whose refund failed during cancellation."""

    payment_id: UUID
    code: str
    message: str


class CancellationOutcomeResponse(BaseModel):
    """Cancelled attendance plus refund results.

    Attributes:
        attendance: The cancelled attendance.
        refunded_payment_ids: Payments refunded by the operation.
        failed_refunds: Payments left unrefunded, with the reason.
        fully_refunded: True when every completed payment was refunded.
    """

    attendance: AttendanceResponse
    refunded_payment_ids: list[UUID] = Field(default_factory=list)
    failed_refunds: list[RefundFailureResponse] = Field(default_factory=list)
    fully_refunded: bool

    @classmethod
    def from_dto(cls, dto: CancellationOutcome) -> "CancellationOutcomeResponse":
        return cls(
            attendance=AttendanceResponse.from_dto(dto.attendance),
            refunded_payment_ids=list(dto.refunded_payment_ids),
            failed_refunds=[
                RefundFailureResponse(
                    payment_id=failure.payment_id,
                    code=failure.code,
                    message=failure.message,
                )
                for failure in dto.failed_refunds
            ],
            fully_refunded=dto.fully_refunded,
        )
