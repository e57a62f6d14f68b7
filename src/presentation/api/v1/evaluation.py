"""Evaluation API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.dto import EvaluationRequest
from src.application.services import EvaluationService
from src.core.dependencies import get_evaluation_service
from src.core.metrics import record_evaluation, track_evaluation_latency
from src.presentation.schemas import (
    EvaluationRequestSchema,
    EvaluationResponseSchema,
    ErrorResponseSchema,
    InsightsSchema,
)
from src.service.decision_engine import (
    PurchaseQuestionnaire,
    SavingsPlan,
    UserProfile,
)

evaluation_router = APIRouter(
    prefix="/evaluation",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)


def _to_dto(request: EvaluationRequestSchema) -> EvaluationRequest:
    profile = request.profile
    answers = request.questionnaire

    return EvaluationRequest(
        user_id=request.user_id,
        profile=UserProfile(
            monthly_income=profile.monthly_income,
            monthly_obligations=profile.monthly_obligations,
            current_balance=profile.current_balance,
            currency=profile.currency,
            full_name=profile.full_name,
            language=profile.language,
        ),
        savings_plans=[
            SavingsPlan(
                id=plan.id,
                target_amount=plan.target_amount,
                monthly_amount=plan.monthly_amount,
                duration_months=plan.duration_months,
                is_completed=plan.is_completed,
                goal=plan.goal,
                current_savings=plan.current_savings,
            )
            for plan in request.savings_plans
        ],
        questionnaire=PurchaseQuestionnaire(
            item=answers.item,
            price=answers.price,
            why_reason=answers.why_reason,
            has_duplicate=answers.has_duplicate,
            wanted_since=answers.wanted_since,
            urgency=answers.urgency,
            feel_emoji=answers.feel_emoji,
            timing_emoji=answers.timing_emoji,
            help_emoji=answers.help_emoji,
        ),
    )


@evaluation_router.post(
    "",
    response_model=EvaluationResponseSchema,
    status_code=200,
    summary="Evaluate Purchase",
    description="""Evaluate a prospective purchase and store it in the user's history""",
    responses={
        200: {"description": "Purchase evaluated successfully"},
    },
)
async def create_evaluation(
    request: EvaluationRequestSchema,
    evaluation_service: Annotated[EvaluationService, Depends(get_evaluation_service)],
) -> EvaluationResponseSchema:
    """
    Evaluate a purchase for a user.

    Returns the verdict, its score and the four insight cards.
    """
    with track_evaluation_latency():
        response = await evaluation_service.evaluate_purchase(_to_dto(request))

    record_evaluation(response.verdict, response.verdict_score)

    return EvaluationResponseSchema(
        record_id=response.record_id,
        item=response.item,
        price=response.price,
        currency=response.currency,
        verdict=response.verdict,
        verdict_text=response.verdict_text,
        verdict_emoji=response.verdict_emoji,
        verdict_score=response.verdict_score,
        insights=InsightsSchema(**response.insights),
        balance_after_purchase=response.balance_after_purchase,
        safe_buffer=response.safe_buffer,
    )
