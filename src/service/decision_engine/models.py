"""
Data models for purchase evaluation.

These models represent the engine's inputs (profile, savings plans and the
questionnaire) and its output. All of them are immutable: the engine never
mutates what it is given and never keeps anything between calls.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class Currency(str, Enum):
    """Currency the user keeps their budget in."""
    SAR = "SAR"
    USD = "USD"


class Language(str, Enum):
    """UI language. Display only, classification always matches English keywords."""
    ENGLISH = "en"
    ARABIC = "ar"


class FeelEmoji(str, Enum):
    """How the user feels about the item."""
    EXCITED = "excited"
    HAPPY = "happy"
    NEUTRAL = "neutral"
    UNSURE = "unsure"

    @property
    def symbol(self) -> str:
        return _FEEL_SYMBOLS[self]


class TimingEmoji(str, Enum):
    """When the user wants to buy the item."""
    RIGHT_NOW = "right_now"
    THIS_MONTH = "this_month"
    SOON = "soon"
    NO_RUSH = "no_rush"

    @property
    def symbol(self) -> str:
        return _TIMING_SYMBOLS[self]


class HelpEmoji(str, Enum):
    """How the item would help. Collected for history, not scored."""
    ESSENTIAL_FOR_WORK = "essential_for_work"
    IMPROVES_LIFE = "improves_life"
    NICE_TO_HAVE = "nice_to_have"
    JUST_WANT_IT = "just_want_it"

    @property
    def symbol(self) -> str:
        return _HELP_SYMBOLS[self]


_FEEL_SYMBOLS = {
    FeelEmoji.EXCITED: "🤩",
    FeelEmoji.HAPPY: "🙂",
    FeelEmoji.NEUTRAL: "😐",
    FeelEmoji.UNSURE: "🤔",
}

_TIMING_SYMBOLS = {
    TimingEmoji.RIGHT_NOW: "⚡️",
    TimingEmoji.THIS_MONTH: "📅",
    TimingEmoji.SOON: "⏳",
    TimingEmoji.NO_RUSH: "🌱",
}

_HELP_SYMBOLS = {
    HelpEmoji.ESSENTIAL_FOR_WORK: "🧳",
    HelpEmoji.IMPROVES_LIFE: "🌟",
    HelpEmoji.NICE_TO_HAVE: "👍",
    HelpEmoji.JUST_WANT_IT: "👍",
}


class Verdict(str, Enum):
    """Final recommendation. The values are part of the stored record format."""
    YES = "yes"
    WAIT = "wait"
    NO = "no"

    @property
    def display_text(self) -> str:
        return _VERDICT_TEXT[self]

    @property
    def emoji(self) -> str:
        return _VERDICT_EMOJI[self]


_VERDICT_TEXT = {
    Verdict.YES: "Yes - Go ahead",
    Verdict.WAIT: "Wait or reconsider",
    Verdict.NO: "Not recommended now",
}

_VERDICT_EMOJI = {
    Verdict.YES: "✅",
    Verdict.WAIT: "⚠️",
    Verdict.NO: "❌",
}


class InsightKind(str, Enum):
    """The four insight cards. The values are part of the stored record format."""
    WASTING_MONEY = "wastingMoney"
    NEEDING_MONEY_LATER = "needingMoneyLater"
    REALIZING_DIDNT_NEED = "realizingDidntNeed"
    FEELING_GUILTY_RUSHED = "feelingGuiltyRushed"


@dataclass(frozen=True)
class UserProfile:
    """
    The user's financial snapshot at evaluation time.

    Attributes:
        monthly_income: Monthly income, never negative
        monthly_obligations: Fixed monthly obligations, never negative
        current_balance: Money currently available (may be negative)
        currency: Currency every amount is expressed in
        full_name: Display name, not used for scoring
        language: UI language, not used for scoring
    """
    monthly_income: float
    monthly_obligations: float
    current_balance: float
    currency: Currency = Currency.SAR
    full_name: str = ""
    language: Language = Language.ENGLISH


@dataclass(frozen=True)
class SavingsPlan:
    """
    A savings goal the user is working towards.

    Attributes:
        id: Unique plan identifier
        target_amount: Amount the plan aims to reach
        monthly_amount: Amount set aside each month
        duration_months: Planned duration in months
        is_completed: Completed plans are ignored by the engine
        goal: What the user is saving for
        current_savings: Amount saved so far
    """
    id: str
    target_amount: float
    monthly_amount: float
    duration_months: int
    is_completed: bool = False
    goal: str = ""
    current_savings: float = 0.0

    @property
    def is_active(self) -> bool:
        return not self.is_completed


@dataclass(frozen=True)
class PurchaseQuestionnaire:
    """
    Answers collected by the decision helper before evaluation.

    Attributes:
        item: What the user wants to buy
        price: Price of the item, always positive
        why_reason: Free-text reason ("For work", "For fun", ...)
        has_duplicate: Whether the user already owns something similar
        wanted_since: Free-text duration ("For a long time (months+)", ...)
        urgency: Free-text urgency answer, stored but not scored
        feel_emoji: Emotional state towards the item
        timing_emoji: When the user wants to buy
        help_emoji: How the item would help, stored but not scored
    """
    item: str
    price: float
    why_reason: str
    has_duplicate: bool
    wanted_since: str
    urgency: str
    feel_emoji: FeelEmoji
    timing_emoji: TimingEmoji
    help_emoji: Optional[HelpEmoji] = None

    def answers(self) -> Dict[str, str]:
        """Flatten the answers into the string mapping kept with the record."""
        answers = {
            "whyReason": self.why_reason,
            "hasDuplicate": "yes" if self.has_duplicate else "no",
            "wantedSince": self.wanted_since,
            "urgency": self.urgency,
            "feelEmoji": self.feel_emoji.value,
            "timingEmoji": self.timing_emoji.value,
        }
        if self.help_emoji is not None:
            answers["helpEmoji"] = self.help_emoji.value
        return answers


@dataclass(frozen=True)
class EvaluationResult:
    """
    The outcome of evaluating one questionnaire.

    Attributes:
        verdict: Final recommendation
        verdict_score: Signed score the verdict was derived from
        insights: One sentence per insight kind, always all four
        balance_after_purchase: Current balance minus price
        safe_buffer: Balance that must remain to be considered secure
    """
    verdict: Verdict
    verdict_score: int
    insights: Dict[InsightKind, str] = field(default_factory=dict)
    balance_after_purchase: float = 0.0
    safe_buffer: float = 0.0

    def insights_dict(self) -> Dict[str, str]:
        """Insights keyed by their stable string identifiers."""
        return {kind.value: text for kind, text in self.insights.items()}

    def to_dict(self) -> dict:
        """Convert to record/API format."""
        return {
            "verdict": self.verdict.value,
            "verdict_score": self.verdict_score,
            "insights": self.insights_dict(),
            "balance_after_purchase": self.balance_after_purchase,
            "safe_buffer": self.safe_buffer,
        }
