"""Data transfer objects for purchase evaluation operations."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from src.domain.entities import format_timestamp
from src.service.decision_engine import (
    PurchaseQuestionnaire,
    SavingsPlan,
    UserProfile,
)


@dataclass(frozen=True)
class EvaluationRequest:
    """Input data for evaluating a purchase."""
    user_id: str
    profile: UserProfile
    questionnaire: PurchaseQuestionnaire
    savings_plans: List[SavingsPlan] = field(default_factory=list)

    def validate(self) -> List[str]:
        errors = []

        if not self.user_id or not self.user_id.strip():
            errors.append("user_id is required")

        if not self.questionnaire.item or not self.questionnaire.item.strip():
            errors.append("item is required")

        if self.questionnaire.price <= 0:
            errors.append("price must be positive")

        if self.profile.monthly_income < 0:
            errors.append("monthly_income cannot be negative")

        if self.profile.monthly_obligations < 0:
            errors.append("monthly_obligations cannot be negative")

        for plan in self.savings_plans:
            if plan.target_amount <= 0 or plan.monthly_amount <= 0:
                errors.append(f"savings plan {plan.id} amounts must be positive")
            if plan.duration_months <= 0:
                errors.append(f"savings plan {plan.id} duration must be positive")

        return errors


@dataclass(frozen=True)
class EvaluationResponse:
    """Response data for an evaluated purchase."""

    record_id: str
    item: str
    price: float
    currency: str
    verdict: str
    verdict_text: str
    verdict_emoji: str
    verdict_score: int
    insights: Dict[str, str]
    balance_after_purchase: float
    safe_buffer: float

    @classmethod
    def from_entity(cls, record, result) -> "EvaluationResponse":
        return cls(
            record_id=str(record.id),
            item=record.item,
            price=record.price,
            currency=record.currency.value,
            verdict=result.verdict.value,
            verdict_text=result.verdict.display_text,
            verdict_emoji=result.verdict.emoji,
            verdict_score=result.verdict_score,
            insights=result.insights_dict(),
            balance_after_purchase=round(result.balance_after_purchase, 2),
            safe_buffer=round(result.safe_buffer, 2),
        )


@dataclass(frozen=True)
class PurchaseRecordResponse:
    """Full purchase record as shown in history details."""

    record_id: str
    user_id: str
    item: str
    price: float
    currency: str
    verdict: str
    verdict_text: str
    verdict_score: int
    insights: Dict[str, str]
    answers: Dict[str, str]
    purchased: bool
    purchased_at: Optional[str]
    created_at: str

    @classmethod
    def from_entity(cls, record) -> "PurchaseRecordResponse":
        return cls(
            record_id=str(record.id),
            user_id=record.user_id,
            item=record.item,
            price=record.price,
            currency=record.currency.value,
            verdict=record.verdict.value,
            verdict_text=record.verdict.display_text,
            verdict_score=record.verdict_score,
            insights=dict(record.insights),
            answers=dict(record.answers),
            purchased=record.purchased,
            purchased_at=format_timestamp(record.purchased_at),
            created_at=format_timestamp(record.created_at),
        )


@dataclass(frozen=True)
class PurchaseSummary:
    """Brief summary of a purchase for history listings."""

    record_id: str
    item: str
    price: float
    currency: str
    verdict: str
    purchased: bool
    created_at: str


@dataclass(frozen=True)
class PurchaseHistoryResponse:
    """Response containing a user's purchase history."""

    user_id: str
    purchases: List[PurchaseSummary]

    @classmethod
    def from_entities(cls, user_id: str, records: list) -> "PurchaseHistoryResponse":
        summaries = [
            PurchaseSummary(
                record_id=str(r.id),
                item=r.item,
                price=r.price,
                currency=r.currency.value,
                verdict=r.verdict.value,
                purchased=r.purchased,
                created_at=format_timestamp(r.created_at),
            )
            for r in records
        ]
        return cls(user_id=user_id, purchases=summaries)
