"""PostgreSQL implementation of PurchaseRecordRepository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import PurchaseRecord
from src.domain.exceptions import PurchaseRecordNotFoundException
from src.domain.interfaces import PurchaseRecordRepository
from src.infrastructure.database.models import PurchaseRecordModel
from src.service.decision_engine import Currency, Verdict


class PostgresPurchaseRecordRepository(PurchaseRecordRepository):
    """
    PostgreSQL implementation of the purchase history repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, record: PurchaseRecord) -> PurchaseRecord:
        """Persist a purchase record to the database."""
        model = PurchaseRecordModel(
            id=str(record.id),
            user_id=record.user_id,
            item=record.item,
            price=record.price,
            currency=record.currency.value,
            verdict=record.verdict.value,
            verdict_score=record.verdict_score,
            insights=dict(record.insights),
            answers=dict(record.answers),
            purchased=record.purchased,
            purchased_at=record.purchased_at,
            created_at=record.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        return record

    async def update(self, record: PurchaseRecord) -> PurchaseRecord:
        """Update the purchased flag of an existing record."""
        model = await self._get_model(record.id)

        if model is None:
            raise PurchaseRecordNotFoundException(str(record.id))

        model.purchased = record.purchased
        model.purchased_at = record.purchased_at

        await self._session.flush()

        return record

    async def get_by_id(self, record_id: UUID) -> Optional[PurchaseRecord]:
        """Retrieve a purchase record by ID."""
        model = await self._get_model(record_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def get_by_user_id(
        self,
        user_id: str,
        limit: int = 10,
        offset: int = 0,
    ) -> List[PurchaseRecord]:
        """Retrieve records for a user, ordered by created_at descending."""
        stmt = (
            select(PurchaseRecordModel)
            .where(PurchaseRecordModel.user_id == user_id)
            .order_by(PurchaseRecordModel.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def delete_by_user_id(self, user_id: str) -> int:
        """Delete all records of a user."""
        stmt = delete(PurchaseRecordModel).where(
            PurchaseRecordModel.user_id == user_id
        )
        result = await self._session.execute(stmt)
        await self._session.flush()

        return result.rowcount or 0

    async def _get_model(self, record_id: UUID) -> Optional[PurchaseRecordModel]:
        stmt = select(PurchaseRecordModel).where(
            PurchaseRecordModel.id == str(record_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: PurchaseRecordModel) -> PurchaseRecord:
        """Convert database model to domain entity."""
        return PurchaseRecord(
            id=UUID(model.id),
            user_id=model.user_id,
            item=model.item,
            price=model.price,
            currency=Currency(model.currency),
            verdict=Verdict(model.verdict),
            verdict_score=model.verdict_score,
            insights=dict(model.insights),
            answers=dict(model.answers),
            purchased=model.purchased,
            purchased_at=model.purchased_at,
            created_at=model.created_at,
        )
