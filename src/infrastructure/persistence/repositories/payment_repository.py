"""PaymentRepository - SQLAlchemy implementation of PaymentRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Payment entities and the payments table. Money value
objects are stored as separate amount/currency columns.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.payment import Payment
from src.domain.enums.currency import Currency
from src.domain.enums.payment_method import PaymentMethod
from src.domain.enums.payment_provider import PaymentProvider
from src.domain.enums.payment_status import PaymentStatus
from src.domain.protocols.payment_repository import PaymentFilter
from src.domain.value_objects.money import Money
from src.infrastructure.persistence.models.payment import Payment as PaymentModel
from src.infrastructure.persistence.repositories.attendance_repository import as_utc


class PaymentRepository:
    """SQLAlchemy implementation of PaymentRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, payment_id: UUID) -> Payment | None:
        stmt = select(PaymentModel).where(PaymentModel.id == payment_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_user_id(self, user_id: UUID) -> list[Payment]:
        return await self.find_with_filters(PaymentFilter(user_id=user_id))

    async def find_by_event_id(self, event_id: UUID) -> list[Payment]:
        return await self.find_with_filters(PaymentFilter(event_id=event_id))

    async def find_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> list[Payment]:
        stmt = (
            select(PaymentModel)
            .where(PaymentModel.event_id == event_id, PaymentModel.user_id == user_id)
            .order_by(PaymentModel.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_all(self) -> list[Payment]:
        return await self.find_with_filters(PaymentFilter())

    async def find_with_filters(self, filters: PaymentFilter) -> list[Payment]:
        """Find payments matching all given criteria, newest first.

        Args:
            filters: Criteria; None fields are ignored. Bounds are inclusive.

        Returns:
            List of payments (empty if none match).
        """
        conditions: list[Any] = []
        if filters.user_id is not None:
            conditions.append(PaymentModel.user_id == filters.user_id)
        if filters.event_id is not None:
            conditions.append(PaymentModel.event_id == filters.event_id)
        if filters.status is not None:
            conditions.append(PaymentModel.status == filters.status.value)
        if filters.provider is not None:
            conditions.append(PaymentModel.provider == filters.provider.value)
        if filters.payment_method is not None:
            conditions.append(PaymentModel.payment_method == filters.payment_method.value)
        if filters.min_amount is not None:
            conditions.append(PaymentModel.amount >= filters.min_amount)
        if filters.max_amount is not None:
            conditions.append(PaymentModel.amount <= filters.max_amount)
        if filters.start_date is not None:
            conditions.append(PaymentModel.created_at >= filters.start_date)
        if filters.end_date is not None:
            conditions.append(PaymentModel.created_at <= filters.end_date)

        stmt = (
            select(PaymentModel)
            .where(*conditions)
            .order_by(PaymentModel.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, payment: Payment) -> None:
        """Insert or update a payment (upsert by id)."""
        stmt = select(PaymentModel).where(PaymentModel.id == payment.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(payment))
        else:
            self._update_model(existing, payment)

        await self.session.commit()

    async def save_transition(
        self, payment: Payment, expected_status: PaymentStatus
    ) -> bool:
        """Compare-and-set write guarded on the stored status."""
        stmt = (
            update(PaymentModel)
            .where(
                PaymentModel.id == payment.id,
                PaymentModel.status == expected_status.value,
            )
            .values(
                status=payment.status.value,
                provider_payment_id=payment.provider_payment_id,
                payment_metadata=dict(payment.metadata),
                updated_at=payment.updated_at,
            )
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return False
        await self.session.commit()
        return True

    async def delete(self, payment_id: UUID) -> bool:
        stmt = delete(PaymentModel).where(PaymentModel.id == payment_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, model: PaymentModel) -> Payment:
        """Convert database model to domain entity.

        Reconstructs the Money value object from amount/currency columns.
        """
        return Payment(
            id=model.id,
            user_id=model.user_id,
            event_id=model.event_id,
            ticket_id=model.ticket_id,
            amount=Money(amount=model.amount, currency=Currency.parse(model.currency)),
            status=PaymentStatus(model.status),
            provider=PaymentProvider(model.provider),
            provider_payment_id=model.provider_payment_id,
            payment_method=PaymentMethod(model.payment_method),
            description=model.description,
            metadata=dict(model.payment_metadata or {}),
            created_at=as_utc(model.created_at),  # type: ignore[arg-type]
            updated_at=as_utc(model.updated_at),  # type: ignore[arg-type]
        )

    def _to_model(self, entity: Payment) -> PaymentModel:
        return PaymentModel(
            id=entity.id,
            user_id=entity.user_id,
            event_id=entity.event_id,
            ticket_id=entity.ticket_id,
            amount=entity.amount.amount,
            currency=entity.currency.value,
            status=entity.status.value,
            provider=entity.provider.value,
            provider_payment_id=entity.provider_payment_id,
            payment_method=entity.payment_method.value,
            description=entity.description,
            payment_metadata=dict(entity.metadata),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _update_model(self, model: PaymentModel, entity: Payment) -> None:
        model.ticket_id = entity.ticket_id
        model.amount = entity.amount.amount
        model.currency = entity.currency.value
        model.status = entity.status.value
        model.provider = entity.provider.value
        model.provider_payment_id = entity.provider_payment_id
        model.payment_method = entity.payment_method.value
        model.description = entity.description
        model.payment_metadata = dict(entity.metadata)
        model.updated_at = entity.updated_at
