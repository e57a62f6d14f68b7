"""
Verdict Scoring for the Tarayath Purchase Decision Engine.

This module adds up signed points from the classifiers and maps the total
to a verdict. Scoring is independent of the insight cards: it reuses the
same signals but never looks at the generated sentences.
"""

from typing import Iterable

from .classifiers import (
    balance_after_purchase,
    has_urgent_savings_goal,
    is_high_cost_relative_to_income,
    is_long_term_want,
    is_recent_want,
    is_rushed,
    is_work_study_project,
    safe_buffer,
)
from .models import PurchaseQuestionnaire, SavingsPlan, UserProfile, Verdict
from .settings import EngineSettings, engine_settings


def calculate_verdict_score(
    profile: UserProfile,
    plans: Iterable[SavingsPlan],
    questionnaire: PurchaseQuestionnaire,
    settings: EngineSettings = engine_settings,
) -> int:
    """
    Calculate the signed verdict score.

    Points (defaults):
        +2 reason is work/study/project
        +2 balance after purchase stays at or above the safe buffer
        +1 wanted for months
        +1 not rushed
        -2 price above half of monthly income
        -1 an active savings plan is urgent
        -1 rushed ("right now")
        -1 wanted only recently

    Args:
        profile: The user's financial snapshot
        plans: The user's savings plans
        questionnaire: The purchase answers
        settings: Engine settings (uses defaults if not provided)

    Returns:
        Signed integer score
    """
    rushed = is_rushed(questionnaire)
    score = 0

    # Positive factors
    if is_work_study_project(questionnaire, settings):
        score += settings.work_study_points
    if balance_after_purchase(profile, questionnaire) >= safe_buffer(profile, settings):
        score += settings.safe_buffer_points
    if is_long_term_want(questionnaire, settings):
        score += settings.long_term_points
    if not rushed:
        score += settings.not_rushed_points

    # Negative factors
    if is_high_cost_relative_to_income(
        questionnaire.price, profile.monthly_income, settings.high_cost_ratio
    ):
        score -= settings.high_cost_penalty
    if has_urgent_savings_goal(plans, settings):
        score -= settings.urgent_goal_penalty
    if rushed:
        score -= settings.rushed_penalty
    if is_recent_want(questionnaire, settings):
        score -= settings.recent_want_penalty

    return score


def score_to_verdict(
    score: int,
    settings: EngineSettings = engine_settings,
) -> Verdict:
    """
    Map a verdict score to a verdict.

    Both cutoffs are inclusive: 3 is a yes, 0 is a wait, -1 is a no.
    """
    if score >= settings.yes_threshold:
        return Verdict.YES
    elif score >= settings.wait_threshold:
        return Verdict.WAIT
    else:
        return Verdict.NO
