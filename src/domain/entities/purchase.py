"""Purchase record entity representing one evaluated purchase."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional
from uuid import UUID, uuid4

from src.service.decision_engine import Currency, Verdict


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render a timestamp as ISO 8601 UTC with a trailing Z."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat() + "Z"


@dataclass
class PurchaseRecord:
    """
    A purchase the user asked about, with the verdict they were given.

    This is the history entry the clients show under "Recent Decisions".
    It folds the questionnaire answers and the evaluation result together
    so that history can be rendered without re-running the engine.
    """

    user_id: str
    item: str
    price: float
    currency: Currency
    verdict: Verdict
    verdict_score: int
    insights: Dict[str, str]
    answers: Dict[str, str]
    id: UUID = field(default_factory=uuid4)
    purchased: bool = False
    purchased_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def mark_purchased(self) -> None:
        """Mark the item as bought. Keeps the first purchase time."""
        if self.purchased:
            return
        self.purchased = True
        self.purchased_at = datetime.utcnow()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "record_id": str(self.id),
            "user_id": self.user_id,
            "item": self.item,
            "price": self.price,
            "currency": self.currency.value,
            "verdict": self.verdict.value,
            "verdict_score": self.verdict_score,
            "insights": dict(self.insights),
            "answers": dict(self.answers),
            "purchased": self.purchased,
            "purchased_at": format_timestamp(self.purchased_at),
            "created_at": format_timestamp(self.created_at),
        }
