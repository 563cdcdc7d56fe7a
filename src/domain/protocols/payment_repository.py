"""Payment repository protocol.

Defines the interface for payment persistence operations.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.entities.payment import Payment
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus


@dataclass(frozen=True, kw_only=True)
class PaymentFilter:
    """Criteria for ``find_with_filters``. None means "any".

    Amount bounds and date bounds are inclusive.
    """

    user_id: UUID | None = None
    event_id: UUID | None = None
    status: PaymentStatus | None = None
    provider: PaymentProvider | None = None
    payment_method: PaymentMethod | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None

    def matches(self, payment: Payment) -> bool:
        """Evaluate the filter against an in-memory payment."""
        if self.user_id is not None and payment.user_id != self.user_id:
            return False
        if self.event_id is not None and payment.event_id != self.event_id:
            return False
        if self.status is not None and payment.status != self.status:
            return False
        if self.provider is not None and payment.provider != self.provider:
            return False
        if self.payment_method is not None and payment.payment_method != self.payment_method:
            return False
        if self.min_amount is not None and payment.amount.amount < self.min_amount:
            return False
        if self.max_amount is not None and payment.amount.amount > self.max_amount:
            return False
        if self.start_date is not None and payment.created_at < self.start_date:
            return False
        if self.end_date is not None and payment.created_at > self.end_date:
            return False
        return True


class PaymentRepository(Protocol):
    """Protocol for payment persistence operations.

    **Design Principles**:
    - Read methods return domain entities (Payment), not database models
    - Status changes go through ``save_transition`` (compare-and-set)
    - Aggregations (revenue, growth) are computed by query handlers over
      the entities returned here
    """

    async def find_by_id(self, payment_id: UUID) -> Payment | None:
        """Find payment by ID."""
        ...

    async def find_by_user_id(self, user_id: UUID) -> list[Payment]:
        """Find all payments of a user, newest first."""
        ...

    async def find_by_event_id(self, event_id: UUID) -> list[Payment]:
        """Find all payments for an event, newest first."""
        ...

    async def find_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> list[Payment]:
        """Find all payments a user made for an event, oldest first."""
        ...

    async def find_all(self) -> list[Payment]:
        """Find every payment, newest first."""
        ...

    async def find_with_filters(self, filters: PaymentFilter) -> list[Payment]:
        """Find payments matching all given criteria, newest first."""
        ...

    async def save(self, payment: Payment) -> None:
        """Insert or update a payment (upsert by id)."""
        ...

    async def save_transition(
        self, payment: Payment, expected_status: PaymentStatus
    ) -> bool:
        """Persist a status change only if the stored status is unchanged.

        Returns:
            True if written, False on concurrent modification.
        """
        ...

    async def delete(self, payment_id: UUID) -> bool:
        """Delete a payment.

        Returns:
            True if a payment was deleted, False if none existed.
        """
        ...
