"""Payment request and response schemas.

Pydantic schemas for payment API endpoints. Amounts are serialized as
decimal strings; currency, provider and method are plain strings parsed
by the handlers.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos.payment_dtos import (
    PaymentResult,
    PaymentStatsResult,
    PaymentStatusCheckResult,
    RevenueResult,
)
from src.application.queries.handlers.list_payments_handler import PaymentListResult


# =============================================================================
# Request Schemas
# =============================================================================


class CreatePaymentRequest(BaseModel):
    """Request to create a pending payment (also used for ticket purchase).

    Attributes:
        user_id: Paying user.
        event_id: Event paid for.
        amount: Positive amount; at most two decimals, none for CLP.
        currency: Currency code.
        provider: Payment provider.
        payment_method: Payment method.
        ticket_id: Purchased ticket.
        description: Free text (max 500 characters).
        metadata: Extra data (``payment_method_id`` confirms a Stripe intent).
    """

    user_id: UUID = Field(..., description="Paying user")
    event_id: UUID = Field(..., description="Event paid for")
    amount: Decimal = Field(..., description="Amount", examples=["25.00"])
    currency: str = Field(..., description="Currency code", examples=["EUR"])
    provider: str = Field(..., description="Payment provider", examples=["stripe"])
    payment_method: str = Field("unknown", description="Payment method", examples=["credit_card"])
    ticket_id: UUID | None = Field(None, description="Purchased ticket")
    description: str | None = Field(None, description="Description")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Extra data")


class RefundPaymentRequest(BaseModel):
    """Optional body for a refund."""

    reason: str | None = Field(None, description="Refund reason")


# =============================================================================
# Response Schemas
# =============================================================================


class PaymentResponse(BaseModel):
    """Single payment response."""

    id: UUID = Field(..., description="Payment unique identifier")
    user_id: UUID
    event_id: UUID
    ticket_id: UUID | None = None
    amount: Decimal = Field(..., description="Amount")
    currency: str = Field(..., description="Currency code", examples=["EUR"])
    status: str = Field(..., description="Payment status", examples=["completed"])
    provider: str
    provider_payment_id: str | None = Field(None, description="Processor reference")
    payment_method: str
    description: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: PaymentResult) -> "PaymentResponse":
        """Convert application DTO to response schema.

        Args:
            dto: PaymentResult from handler.

        Returns:
            PaymentResponse for API response.
        """
        return cls(
            id=dto.id,
            user_id=dto.user_id,
            event_id=dto.event_id,
            ticket_id=dto.ticket_id,
            amount=dto.amount,
            currency=dto.currency,
            status=dto.status,
            provider=dto.provider,
            provider_payment_id=dto.provider_payment_id,
            payment_method=dto.payment_method,
            description=dto.description,
            metadata=dto.metadata,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class PaymentListResponse(BaseModel):
    """Payment list response."""

    payments: list[PaymentResponse] = Field(..., description="Payments, newest first")
    total_count: int = Field(..., description="Number of payments")

    @classmethod
    def from_dto(cls, dto: PaymentListResult) -> "PaymentListResponse":
        return cls(
            payments=[PaymentResponse.from_dto(p) for p in dto.payments],
            total_count=dto.total_count,
        )


class PaymentStatusCheckResponse(BaseModel):
    """Local status next to the processor's view of the payment."""

    payment_id: UUID
    local_status: str
    remote_status: str
    in_sync: bool

    @classmethod
    def from_dto(cls, dto: PaymentStatusCheckResult) -> "PaymentStatusCheckResponse":
        return cls(
            payment_id=dto.payment_id,
            local_status=dto.local_status,
            remote_status=dto.remote_status,
            in_sync=dto.in_sync,
        )


class PaymentStatsResponse(BaseModel):
    """Payment statistics (completed payments in the reporting currency)."""

    total_amount: Decimal
    total_count: int
    payments_by_status: dict[str, int]
    average_amount: Decimal
    revenue_by_period: dict[str, Decimal] = Field(
        ..., description="YYYY-MM → revenue", examples=[{"2026-01": "150.00"}]
    )
    currency: str

    @classmethod
    def from_dto(cls, dto: PaymentStatsResult) -> "PaymentStatsResponse":
        return cls(
            total_amount=dto.total_amount,
            total_count=dto.total_count,
            payments_by_status=dict(dto.payments_by_status),
            average_amount=dto.average_amount,
            revenue_by_period=dict(dto.revenue_by_period),
            currency=dto.currency,
        )


class RevenueResponse(BaseModel):
    """Total revenue over a timeframe."""

    total: Decimal
    currency: str
    period: str = Field(..., examples=["monthly"])
    start_date: datetime | None = None
    end_date: datetime
    transaction_count: int
    average_amount: Decimal
    revenue_by_time_segment: dict[str, Decimal] = Field(default_factory=dict)

    @classmethod
    def from_dto(cls, dto: RevenueResult) -> "RevenueResponse":
        return cls(
            total=dto.total,
            currency=dto.currency,
            period=dto.period,
            start_date=dto.start_date,
            end_date=dto.end_date,
            transaction_count=dto.transaction_count,
            average_amount=dto.average_amount,
            revenue_by_time_segment=dict(dto.revenue_by_time_segment),
        )
