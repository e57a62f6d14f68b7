"""Data Transfer Objects for application layer."""

from .purchase import (
    EvaluationRequest,
    EvaluationResponse,
    PurchaseHistoryResponse,
    PurchaseRecordResponse,
    PurchaseSummary,
)

__all__ = [
    "EvaluationRequest",
    "EvaluationResponse",
    "PurchaseHistoryResponse",
    "PurchaseRecordResponse",
    "PurchaseSummary",
]
