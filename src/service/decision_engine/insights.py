"""
Insight Cards for the Tarayath Purchase Decision Engine.

Each card answers one of the four worries shown next to the verdict:
wasting money, needing the money later, realizing the item wasn't needed,
and feeling guilty or rushed. Every card is an ordered chain where the first
matching condition picks the sentence.

The sentences are stored verbatim with each purchase record, so changing a
sentence changes history rendering for existing users.
"""

from typing import Dict, Iterable

from .classifiers import (
    balance_after_purchase,
    has_urgent_savings_goal,
    is_emotional,
    is_high_cost_relative_to_income,
    is_long_term_want,
    is_recent_want,
    is_rushed,
    is_work_study_project,
    safe_buffer,
)
from .models import InsightKind, PurchaseQuestionnaire, SavingsPlan, UserProfile
from .settings import EngineSettings, engine_settings


USEFUL_INVESTMENT = (
    "Based on your reasons (work/study/project), this item is a useful investment."
)
EMOTIONAL_HIGH_COST = (
    "This item is mostly emotional or fun-based. At this cost, it may not bring "
    "long-term value."
)
REASONABLE_ENJOYMENT = (
    "This purchase seems reasonable for personal enjoyment within your budget."
)

ABOVE_SAFE_BUFFER = (
    "After buying, your savings will remain above a safe buffer. You're secure."
)
IMPACTS_URGENT_GOALS = (
    "This purchase will impact your urgent savings goals. Consider the timing."
)
BELOW_SAFE_LEVEL = (
    "This purchase will reduce your savings below a safe level. It could impact "
    "future goals."
)

FILLS_REAL_NEED = (
    "You don't own anything like this, and your answers show it will fill a real need."
)
REGRET_POSSIBLE = (
    "This seems like a first-time, high-cost purchase driven by emotion — regret is "
    "possible."
)
ALREADY_OWN_SIMILAR = (
    "You already own something similar. Consider if this upgrade is truly necessary."
)
WELL_CONSIDERED = "Based on your answers, this purchase seems well-considered."

NOT_RUSHED = (
    "You've wanted this for a while and answered thoughtfully. This isn't a rushed "
    "decision."
)
SECOND_THOUGHTS = (
    "It seems like a recent want, and somewhat urgent. Guilt or second thoughts may "
    "follow."
)
REASONABLE_TIMING = (
    "Your timing seems reasonable. You've given this appropriate consideration."
)


def wasting_money_insight(
    profile: UserProfile,
    questionnaire: PurchaseQuestionnaire,
    settings: EngineSettings = engine_settings,
) -> str:
    """
    Is the money going somewhere useful?

    A work/study/project reason wins even when the item is expensive.
    """
    if is_work_study_project(questionnaire, settings):
        return USEFUL_INVESTMENT
    elif is_high_cost_relative_to_income(
        questionnaire.price, profile.monthly_income, settings.wasting_money_cost_ratio
    ):
        return EMOTIONAL_HIGH_COST
    else:
        return REASONABLE_ENJOYMENT


def needing_money_later_insight(
    profile: UserProfile,
    plans: Iterable[SavingsPlan],
    questionnaire: PurchaseQuestionnaire,
    settings: EngineSettings = engine_settings,
) -> str:
    """Will the user be short of money after buying?"""
    if balance_after_purchase(profile, questionnaire) >= safe_buffer(profile, settings):
        return ABOVE_SAFE_BUFFER
    elif has_urgent_savings_goal(plans, settings):
        return IMPACTS_URGENT_GOALS
    else:
        return BELOW_SAFE_LEVEL


def realizing_didnt_need_insight(
    profile: UserProfile,
    questionnaire: PurchaseQuestionnaire,
    settings: EngineSettings = engine_settings,
) -> str:
    """
    Might the user later realize they didn't need it?

    The last sentence is only reached for a first-of-its-kind, emotional
    purchase that is not high cost.
    """
    first_time = not questionnaire.has_duplicate
    emotional = is_emotional(questionnaire)
    high_cost = is_high_cost_relative_to_income(
        questionnaire.price, profile.monthly_income, settings.high_cost_ratio
    )

    if first_time and not emotional:
        return FILLS_REAL_NEED
    elif first_time and high_cost and emotional:
        return REGRET_POSSIBLE
    elif questionnaire.has_duplicate:
        return ALREADY_OWN_SIMILAR
    else:
        return WELL_CONSIDERED


def feeling_guilty_rushed_insight(
    questionnaire: PurchaseQuestionnaire,
    settings: EngineSettings = engine_settings,
) -> str:
    """Is this a rushed decision the user may feel guilty about?"""
    rushed = is_rushed(questionnaire)

    if is_long_term_want(questionnaire, settings) and not rushed:
        return NOT_RUSHED
    elif is_recent_want(questionnaire, settings) or rushed:
        return SECOND_THOUGHTS
    else:
        return REASONABLE_TIMING


def generate_insights(
    profile: UserProfile,
    plans: Iterable[SavingsPlan],
    questionnaire: PurchaseQuestionnaire,
    settings: EngineSettings = engine_settings,
) -> Dict[InsightKind, str]:
    """
    Build all four insight cards.

    Args:
        profile: The user's financial snapshot
        plans: The user's savings plans
        questionnaire: The purchase answers
        settings: Engine settings (uses defaults if not provided)

    Returns:
        Mapping with exactly one sentence per InsightKind
    """
    plans = list(plans)
    return {
        InsightKind.WASTING_MONEY: wasting_money_insight(
            profile, questionnaire, settings
        ),
        InsightKind.NEEDING_MONEY_LATER: needing_money_later_insight(
            profile, plans, questionnaire, settings
        ),
        InsightKind.REALIZING_DIDNT_NEED: realizing_didnt_need_insight(
            profile, questionnaire, settings
        ),
        InsightKind.FEELING_GUILTY_RUSHED: feeling_guilty_rushed_insight(
            questionnaire, settings
        ),
    }
