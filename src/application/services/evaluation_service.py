"""Evaluation service - orchestrates the purchase evaluation use case."""

from uuid import UUID

import structlog

from src.domain.entities import PurchaseRecord
from src.domain.exceptions import (
    InvalidEvaluationRequestException,
    PurchaseRecordNotFoundException,
)
from src.domain.interfaces import PurchaseRecordRepository
from src.application.dto import (
    EvaluationRequest,
    EvaluationResponse,
    PurchaseHistoryResponse,
    PurchaseRecordResponse,
)
from src.core.metrics import record_purchase_marked
from src.service.decision_engine import evaluate, explain_evaluation

logger = structlog.get_logger(__name__)


class EvaluationService:
    """
    Application service for purchase evaluation and history use cases.
    """

    def __init__(self, purchase_repository: PurchaseRecordRepository):
        self._purchase_repo = purchase_repository

    async def evaluate_purchase(self, request: EvaluationRequest) -> EvaluationResponse:
        """
        Evaluate a purchase and append it to the user's history.

        Args:
            request: The evaluation request with profile, plans and answers

        Returns:
            EvaluationResponse with verdict, score and insights

        Raises:
            InvalidEvaluationRequestException: If request validation fails
        """
        errors = request.validate()
        if errors:
            raise InvalidEvaluationRequestException("; ".join(errors))

        questionnaire = request.questionnaire
        log = logger.bind(
            user_id=request.user_id,
            item=questionnaire.item,
            price=questionnaire.price,
        )
        log.info("evaluation_requested", plan_count=len(request.savings_plans))

        result = evaluate(request.profile, request.savings_plans, questionnaire)
        log.debug(
            "evaluation_explained",
            explanation=explain_evaluation(result, request.savings_plans),
        )

        record = PurchaseRecord(
            user_id=request.user_id,
            item=questionnaire.item.strip(),
            price=questionnaire.price,
            currency=request.profile.currency,
            verdict=result.verdict,
            verdict_score=result.verdict_score,
            insights=result.insights_dict(),
            answers=questionnaire.answers(),
        )
        await self._purchase_repo.save(record)

        log.info(
            "purchase_recorded",
            record_id=str(record.id),
            verdict=result.verdict.value,
            verdict_score=result.verdict_score,
        )

        return EvaluationResponse.from_entity(record, result)

    async def get_purchase_history(
        self,
        user_id: str,
        limit: int = 10,
        offset: int = 0,
    ) -> PurchaseHistoryResponse:
        """
        Get purchase history for a user.

        Args:
            user_id: The user's identifier
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            PurchaseHistoryResponse with records, newest first
        """
        records = await self._purchase_repo.get_by_user_id(
            user_id, limit=limit, offset=offset
        )
        return PurchaseHistoryResponse.from_entities(user_id, records)

    async def get_purchase(self, record_id: UUID) -> PurchaseRecordResponse:
        """
        Get a specific purchase record by ID.

        Raises:
            PurchaseRecordNotFoundException: If record not found
        """
        record = await self._get_record(record_id)
        return PurchaseRecordResponse.from_entity(record)

    async def mark_purchased(self, record_id: UUID) -> PurchaseRecordResponse:
        """
        Mark a purchase as bought.

        Calling it again leaves the original purchase time and the
        purchases-marked counter untouched.

        Raises:
            PurchaseRecordNotFoundException: If record not found
        """
        record = await self._get_record(record_id)

        if record.purchased:
            logger.info("purchase_already_marked", record_id=str(record_id))
            return PurchaseRecordResponse.from_entity(record)

        record.mark_purchased()
        await self._purchase_repo.update(record)
        record_purchase_marked(record.verdict.value)

        logger.info(
            "purchase_marked",
            record_id=str(record_id),
            user_id=record.user_id,
            verdict=record.verdict.value,
        )

        return PurchaseRecordResponse.from_entity(record)

    async def clear_history(self, user_id: str) -> int:
        """
        Delete a user's whole purchase history.

        Returns:
            Number of records deleted
        """
        deleted = await self._purchase_repo.delete_by_user_id(user_id)
        logger.info("purchase_history_cleared", user_id=user_id, deleted=deleted)
        return deleted

    async def _get_record(self, record_id: UUID) -> PurchaseRecord:
        record = await self._purchase_repo.get_by_id(record_id)
        if record is None:
            logger.warning("purchase_not_found", record_id=str(record_id))
            raise PurchaseRecordNotFoundException(str(record_id))
        return record
