"""Payment database model.

Architecture:
    - Amount stored as Numeric(12, 2) with separate currency column
    - Enums stored as lowercase strings (currency uppercase)
    - Metadata stored as JSONB (column "metadata", attribute payment_metadata
      because ``metadata`` is reserved by SQLAlchemy declarative)
"""

from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import Index, Numeric, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Payment(BaseMutableModel):
    """Payment model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        user_id: Paying user
        event_id: Event paid for
        ticket_id: Purchased ticket (nullable)
        amount: Positive amount
        currency: Currency code (EUR, USD, ...)
        status: pending, completed, failed, refunded, cancelled
        provider: stripe, paypal, mercado_pago, bank_transfer, cash, other
        provider_payment_id: Processor reference (nullable)
        payment_method: credit_card, debit_card, ..., unknown
        description: Optional description
        payment_metadata: Open key-value bag (JSONB)

    Indexes:
        - ix_payments_user_id / ix_payments_event_id: FK lookups
        - ix_payments_status: Revenue queries
        - idx_payments_event_user: Refund lookups on attendance cancellation
    """

    __tablename__ = "payments"

    user_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    event_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    ticket_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True)

    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(10), nullable=False)

    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    provider: Mapped[str] = mapped_column(String(30), nullable=False)
    provider_payment_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    payment_method: Mapped[str] = mapped_column(
        String(30), nullable=False, default="unknown"
    )

    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    payment_metadata: Mapped[dict[str, Any]] = mapped_column(
        "metadata", JSONB, nullable=False, default=dict
    )

    __table_args__ = (Index("idx_payments_event_user", "event_id", "user_id"),)

    def __repr__(self) -> str:
        return (
            f"<Payment(id={self.id}, status={self.status}, "
            f"amount={self.amount} {self.currency})>"
        )
