"""Purchase history Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .evaluation import InsightsSchema


class PurchaseRecordSchema(BaseModel):
    """Schema for a full purchase record."""

    record_id: str = Field(
        ...,
        description="UUID of the purchase record",
    )
    user_id: str
    item: str
    price: float
    currency: str
    verdict: str
    verdict_text: str
    verdict_score: int
    insights: InsightsSchema
    answers: dict[str, str] = Field(
        ...,
        description="Questionnaire answers the verdict was based on",
    )
    purchased: bool
    purchased_at: Optional[str] = Field(
        None,
        description="ISO 8601 timestamp of the purchase (null if not bought)",
    )
    created_at: str = Field(
        ...,
        description="ISO 8601 timestamp of the evaluation",
    )


class PurchaseSummarySchema(BaseModel):
    """Schema for a purchase summary in history."""

    record_id: str
    item: str
    price: float
    currency: str
    verdict: str
    purchased: bool
    created_at: str


class PurchaseHistoryResponseSchema(BaseModel):
    """Schema for GET /v1/purchases/history response."""

    user_id: str = Field(
        ...,
        description="The user's identifier",
    )
    purchases: list[PurchaseSummarySchema] = Field(
        ...,
        description="List of past evaluations, newest first",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "user_id": "user_123",
                    "purchases": [
                        {
                            "record_id": "550e8400-e29b-41d4-a716-446655440000",
                            "item": "Laptop",
                            "price": 1000,
                            "currency": "SAR",
                            "verdict": "yes",
                            "purchased": False,
                            "created_at": "2025-09-17T12:00:00Z",
                        }
                    ],
                }
            ]
        }
    )


class ClearHistoryResponseSchema(BaseModel):
    """Schema for DELETE /v1/purchases/history response."""

    user_id: str
    deleted: int = Field(
        ...,
        ge=0,
        description="Number of records deleted",
    )
