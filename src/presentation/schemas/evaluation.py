"""Evaluation-related Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

from src.service.decision_engine import (
    Currency,
    FeelEmoji,
    HelpEmoji,
    Language,
    TimingEmoji,
)


class UserProfileSchema(BaseModel):
    """The user's financial snapshot sent with each evaluation."""

    monthly_income: float = Field(
        ...,
        ge=0,
        description="Monthly income",
        examples=[10000],
    )
    monthly_obligations: float = Field(
        0,
        ge=0,
        description="Fixed monthly obligations",
        examples=[3000],
    )
    current_balance: float = Field(
        ...,
        description="Money currently available (may be negative)",
        examples=[40000],
    )
    currency: Currency = Field(
        Currency.SAR,
        description="Currency all amounts are expressed in",
    )
    full_name: str = Field(
        "",
        max_length=255,
        description="Display name",
    )
    language: Language = Field(
        Language.ENGLISH,
        description="UI language (does not affect scoring)",
    )


class SavingsPlanSchema(BaseModel):
    """A savings plan of the user."""

    id: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Plan identifier",
    )
    target_amount: float = Field(
        ...,
        gt=0,
        description="Amount the plan aims to reach",
        examples=[12000],
    )
    monthly_amount: float = Field(
        ...,
        gt=0,
        description="Amount saved each month",
        examples=[1000],
    )
    duration_months: int = Field(
        ...,
        gt=0,
        description="Planned duration in months",
        examples=[12],
    )
    is_completed: bool = Field(
        False,
        description="Completed plans are ignored by the engine",
    )
    goal: str = Field(
        "",
        max_length=255,
        description="What the user is saving for",
    )
    current_savings: float = Field(
        0,
        ge=0,
        description="Amount saved so far",
    )


class QuestionnaireSchema(BaseModel):
    """Answers from the decision helper."""

    item: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="What the user wants to buy",
        examples=["Laptop"],
    )
    price: float = Field(
        ...,
        gt=0,
        description="Price of the item",
        examples=[1000],
    )
    why_reason: str = Field(
        ...,
        max_length=500,
        description="Why the user wants the item",
        examples=["For work"],
    )
    has_duplicate: bool = Field(
        ...,
        description="Whether the user already owns something similar",
    )
    wanted_since: str = Field(
        ...,
        max_length=500,
        description="How long the user has wanted it",
        examples=["For a long time (months+)"],
    )
    urgency: str = Field(
        "",
        max_length=500,
        description="How urgent the purchase is (stored, not scored)",
        examples=["Not urgent"],
    )
    feel_emoji: FeelEmoji = Field(
        ...,
        description="How the user feels about the item",
    )
    timing_emoji: TimingEmoji = Field(
        ...,
        description="When the user wants to buy",
    )
    help_emoji: Optional[HelpEmoji] = Field(
        None,
        description="How the item would help (stored, not scored)",
    )

    @field_validator("item")
    @classmethod
    def validate_item(cls, v: str) -> str:
        """Ensure item is not just whitespace."""
        if not v.strip():
            raise ValueError("item cannot be empty or whitespace")
        return v.strip()


class EvaluationRequestSchema(BaseModel):
    """Schema for POST /v1/evaluation request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "user_id": "user_123",
                    "profile": {
                        "monthly_income": 10000,
                        "monthly_obligations": 3000,
                        "current_balance": 40000,
                        "currency": "SAR",
                    },
                    "savings_plans": [],
                    "questionnaire": {
                        "item": "Laptop",
                        "price": 1000,
                        "why_reason": "For work",
                        "has_duplicate": False,
                        "wanted_since": "For a long time (months+)",
                        "urgency": "Not urgent",
                        "feel_emoji": "happy",
                        "timing_emoji": "no_rush",
                    },
                }
            ]
        }
    )
    user_id: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Unique identifier for the user",
        examples=["user_123"],
    )
    profile: UserProfileSchema
    savings_plans: list[SavingsPlanSchema] = Field(
        default_factory=list,
        description="The user's savings plans",
    )
    questionnaire: QuestionnaireSchema

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        """Ensure user_id is not just whitespace."""
        if not v.strip():
            raise ValueError("user_id cannot be empty or whitespace")
        return v.strip()


class InsightsSchema(BaseModel):
    """The four insight cards. Field names are the stored record keys."""

    wastingMoney: str
    needingMoneyLater: str
    realizingDidntNeed: str
    feelingGuiltyRushed: str


class EvaluationResponseSchema(BaseModel):
    """Schema for POST /v1/evaluation response body."""

    record_id: str = Field(
        ...,
        description="UUID of the stored purchase record",
    )
    item: str
    price: float
    currency: Currency
    verdict: str = Field(
        ...,
        description="yes, wait or no",
        examples=["yes"],
    )
    verdict_text: str = Field(
        ...,
        description="Display text for the verdict",
        examples=["Yes - Go ahead"],
    )
    verdict_emoji: str = Field(
        ...,
        examples=["✅"],
    )
    verdict_score: int = Field(
        ...,
        description="Signed score the verdict was derived from",
        examples=[6],
    )
    insights: InsightsSchema
    balance_after_purchase: float = Field(
        ...,
        description="Current balance minus price",
        examples=[39000],
    )
    safe_buffer: float = Field(
        ...,
        description="Three months of income",
        examples=[30000],
    )
