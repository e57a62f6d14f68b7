"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database import get_db_session
from src.infrastructure.repositories import PostgresPurchaseRecordRepository
from src.application.services import EvaluationService


# Repository dependencies
async def get_purchase_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresPurchaseRecordRepository:
    """Get a PurchaseRecordRepository instance."""
    return PostgresPurchaseRecordRepository(session)


# Service dependencies
async def get_evaluation_service(
    purchase_repo: Annotated[
        PostgresPurchaseRecordRepository, Depends(get_purchase_repository)
    ],
) -> EvaluationService:
    """Get an EvaluationService instance."""
    return EvaluationService(purchase_repository=purchase_repo)
