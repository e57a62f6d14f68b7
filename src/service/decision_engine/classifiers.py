"""
Purchase Classifiers for the Tarayath Purchase Decision Engine.

This module turns the raw inputs into the boolean and numeric signals that
both the insight cards and the verdict score are built from:
- Reason classification (work/study/project)
- Cost relative to income
- Urgent savings goals
- How long the item has been wanted
- Rushed and emotional signals
- Balance after purchase and the safe buffer

Free-text answers are matched case-insensitively by substring against
English keywords only. Answers typed in Arabic never match.
"""

from typing import Iterable

from .models import (
    FeelEmoji,
    PurchaseQuestionnaire,
    SavingsPlan,
    TimingEmoji,
    UserProfile,
)
from .settings import EngineSettings, engine_settings


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def is_work_study_project(
    questionnaire: PurchaseQuestionnaire,
    settings: EngineSettings = engine_settings,
) -> bool:
    """
    Check whether the stated reason is productive (work, study or project).

    Args:
        questionnaire: The purchase answers
        settings: Engine settings (uses defaults if not provided)

    Returns:
        True if the reason mentions any work/study/project keyword
    """
    return _contains_any(questionnaire.why_reason, settings.work_study_keywords)


def is_high_cost_relative_to_income(
    price: float,
    monthly_income: float,
    threshold: float,
) -> bool:
    """
    Check whether a price exceeds a share of monthly income.

    Two different thresholds are in use (0.3 for the wasting-money insight,
    0.5 for the realizing insight and the verdict penalty).

    With zero income every positive price is above the threshold product
    (0 * threshold), so no division is needed.

    Args:
        price: Item price
        monthly_income: User's monthly income
        threshold: Fraction of income

    Returns:
        True if price > monthly_income * threshold
    """
    return price > monthly_income * threshold


def has_urgent_savings_goal(
    plans: Iterable[SavingsPlan],
    settings: EngineSettings = engine_settings,
) -> bool:
    """
    Check whether any active savings plan ends within the urgent horizon.

    Completed plans are ignored.
    """
    return any(
        plan.is_active and plan.duration_months <= settings.urgent_goal_months
        for plan in plans
    )


def total_planned_monthly_savings(plans: Iterable[SavingsPlan]) -> float:
    """Sum of monthly contributions over active plans."""
    return sum(plan.monthly_amount for plan in plans if plan.is_active)


def is_long_term_want(
    questionnaire: PurchaseQuestionnaire,
    settings: EngineSettings = engine_settings,
) -> bool:
    return _contains_any(questionnaire.wanted_since, settings.long_term_keywords)


def is_recent_want(
    questionnaire: PurchaseQuestionnaire,
    settings: EngineSettings = engine_settings,
) -> bool:
    return _contains_any(questionnaire.wanted_since, settings.recent_keywords)


def is_rushed(questionnaire: PurchaseQuestionnaire) -> bool:
    return questionnaire.timing_emoji == TimingEmoji.RIGHT_NOW


def is_emotional(questionnaire: PurchaseQuestionnaire) -> bool:
    return questionnaire.feel_emoji == FeelEmoji.EXCITED


def balance_after_purchase(
    profile: UserProfile,
    questionnaire: PurchaseQuestionnaire,
) -> float:
    """Current balance minus price. Negative when the purchase overdraws."""
    return profile.current_balance - questionnaire.price


def safe_buffer(
    profile: UserProfile,
    settings: EngineSettings = engine_settings,
) -> float:
    """Balance that must remain after buying: N months of income (default 3)."""
    return profile.monthly_income * settings.safe_buffer_months
