"""API endpoints for purchase history."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from src.application.dto import PurchaseRecordResponse
from src.application.services import EvaluationService
from src.core.dependencies import get_evaluation_service
from src.presentation.schemas import (
    ClearHistoryResponseSchema,
    ErrorResponseSchema,
    InsightsSchema,
    PurchaseHistoryResponseSchema,
    PurchaseRecordSchema,
    PurchaseSummarySchema,
)

purchases_router = APIRouter(prefix="/purchases")

UserIdQuery = Annotated[
    str,
    Query(
        min_length=1,
        max_length=255,
        description="User ID the history belongs to",
    ),
]
RecordIdPath = Annotated[
    UUID,
    Path(description="UUID of the purchase record"),
]


def _to_schema(response: PurchaseRecordResponse) -> PurchaseRecordSchema:
    return PurchaseRecordSchema(
        record_id=response.record_id,
        user_id=response.user_id,
        item=response.item,
        price=response.price,
        currency=response.currency,
        verdict=response.verdict,
        verdict_text=response.verdict_text,
        verdict_score=response.verdict_score,
        insights=InsightsSchema(**response.insights),
        answers=response.answers,
        purchased=response.purchased,
        purchased_at=response.purchased_at,
        created_at=response.created_at,
    )


@purchases_router.get(
    "/history",
    response_model=PurchaseHistoryResponseSchema,
    summary="Get Purchase History",
    description="""
    Retrieve the purchase history for a user.

    Returns past evaluations ordered by date (newest first).
    """,
    responses={
        200: {"description": "History retrieved successfully"},
    },
)
async def get_purchase_history(
    user_id: UserIdQuery,
    evaluation_service: Annotated[EvaluationService, Depends(get_evaluation_service)],
    limit: Annotated[
        int,
        Query(ge=1, le=100, description="Maximum number of records to return"),
    ] = 10,
    offset: Annotated[
        int,
        Query(ge=0, description="Number of records to skip"),
    ] = 0,
) -> PurchaseHistoryResponseSchema:
    response = await evaluation_service.get_purchase_history(user_id, limit, offset)

    return PurchaseHistoryResponseSchema(
        user_id=response.user_id,
        purchases=[
            PurchaseSummarySchema(
                record_id=p.record_id,
                item=p.item,
                price=p.price,
                currency=p.currency,
                verdict=p.verdict,
                purchased=p.purchased,
                created_at=p.created_at,
            )
            for p in response.purchases
        ],
    )


@purchases_router.delete(
    "/history",
    response_model=ClearHistoryResponseSchema,
    summary="Clear Purchase History",
    description="Delete every purchase record of a user.",
)
async def clear_purchase_history(
    user_id: UserIdQuery,
    evaluation_service: Annotated[EvaluationService, Depends(get_evaluation_service)],
) -> ClearHistoryResponseSchema:
    deleted = await evaluation_service.clear_history(user_id)
    return ClearHistoryResponseSchema(user_id=user_id, deleted=deleted)


@purchases_router.get(
    "/{record_id}",
    response_model=PurchaseRecordSchema,
    summary="Get Purchase Record",
    description="""
    Retrieve a purchase record by its ID, including the questionnaire
    answers and the insight cards shown at the time.
    """,
    responses={
        200: {"description": "Record retrieved successfully"},
        404: {"model": ErrorResponseSchema, "description": "Record not found"},
    },
)
async def get_purchase(
    record_id: RecordIdPath,
    evaluation_service: Annotated[EvaluationService, Depends(get_evaluation_service)],
) -> PurchaseRecordSchema:
    response = await evaluation_service.get_purchase(record_id)
    return _to_schema(response)


@purchases_router.post(
    "/{record_id}/purchased",
    response_model=PurchaseRecordSchema,
    summary="Mark As Purchased",
    description="Record that the user went ahead and bought the item.",
    responses={
        200: {"description": "Record updated"},
        404: {"model": ErrorResponseSchema, "description": "Record not found"},
    },
)
async def mark_purchased(
    record_id: RecordIdPath,
    evaluation_service: Annotated[EvaluationService, Depends(get_evaluation_service)],
) -> PurchaseRecordSchema:
    response = await evaluation_service.mark_purchased(record_id)
    return _to_schema(response)
