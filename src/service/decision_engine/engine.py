"""
Purchase Decision Engine for Tarayath.

This module runs a complete evaluation:
1. Generate the four insight cards
2. Calculate the verdict score
3. Map the score to a verdict
4. Return the result together with the liquidity diagnostics

This is the main entry point for the decision engine. It is a pure
function of its inputs. The same inputs always produce an identical
result, and it can be called concurrently.
"""

from typing import Iterable

from .classifiers import (
    balance_after_purchase,
    safe_buffer,
    total_planned_monthly_savings,
)
from .insights import generate_insights
from .models import (
    EvaluationResult,
    InsightKind,
    PurchaseQuestionnaire,
    SavingsPlan,
    UserProfile,
)
from .settings import EngineSettings, engine_settings
from .verdict import calculate_verdict_score, score_to_verdict


def evaluate(
    profile: UserProfile,
    plans: Iterable[SavingsPlan],
    questionnaire: PurchaseQuestionnaire,
    settings: EngineSettings = engine_settings,
) -> EvaluationResult:
    """
    Evaluate a prospective purchase.

    Inputs are assumed to be validated already (positive price, non-negative
    income). Zero income is tolerated: nothing divides by income.

    Args:
        profile: The user's financial snapshot
        plans: The user's savings plans (completed ones are ignored)
        questionnaire: The purchase answers
        settings: Engine settings (uses defaults if not provided)

    Returns:
        EvaluationResult with verdict, score and all four insights
    """
    plans = list(plans)

    insights = generate_insights(profile, plans, questionnaire, settings)
    score = calculate_verdict_score(profile, plans, questionnaire, settings)

    return EvaluationResult(
        verdict=score_to_verdict(score, settings),
        verdict_score=score,
        insights=insights,
        balance_after_purchase=balance_after_purchase(profile, questionnaire),
        safe_buffer=safe_buffer(profile, settings),
    )


def explain_evaluation(
    result: EvaluationResult,
    plans: Iterable[SavingsPlan] = (),
) -> str:
    """
    Generate a human-readable explanation of an evaluation.

    This can be used for:
    - Debug logging
    - Support reference

    Args:
        result: The evaluation to explain
        plans: Savings plans, to report the planned monthly savings

    Returns:
        Human-readable explanation string
    """
    lines = [
        f"Verdict: {result.verdict.value.upper()} {result.verdict.emoji} "
        f"({result.verdict.display_text})",
        f"Verdict Score: {result.verdict_score}",
        f"Balance after purchase: {result.balance_after_purchase:.2f} "
        f"(safe buffer {result.safe_buffer:.2f})",
    ]

    planned = total_planned_monthly_savings(plans)
    if planned > 0:
        lines.append(f"Planned monthly savings: {planned:.2f}")

    lines.append("")
    lines.append("Insights:")
    for kind in InsightKind:
        lines.append(f"  - {kind.value}: {result.insights[kind]}")

    return "\n".join(lines)
