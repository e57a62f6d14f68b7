"""Pydantic schemas for API request/response validation."""

from .evaluation import (
    EvaluationRequestSchema,
    EvaluationResponseSchema,
    InsightsSchema,
    QuestionnaireSchema,
    SavingsPlanSchema,
    UserProfileSchema,
)
from .purchase import (
    ClearHistoryResponseSchema,
    PurchaseHistoryResponseSchema,
    PurchaseRecordSchema,
    PurchaseSummarySchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "EvaluationRequestSchema",
    "EvaluationResponseSchema",
    "InsightsSchema",
    "QuestionnaireSchema",
    "SavingsPlanSchema",
    "UserProfileSchema",
    "ClearHistoryResponseSchema",
    "PurchaseHistoryResponseSchema",
    "PurchaseRecordSchema",
    "PurchaseSummarySchema",
    "ErrorResponseSchema",
]
