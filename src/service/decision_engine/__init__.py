"""
Purchase Decision Engine for Tarayath
"""

from .models import (
    Currency,
    Language,
    FeelEmoji,
    TimingEmoji,
    HelpEmoji,
    Verdict,
    InsightKind,
    UserProfile,
    SavingsPlan,
    PurchaseQuestionnaire,
    EvaluationResult,
)
from .settings import EngineSettings, engine_settings
from .classifiers import (
    is_work_study_project,
    is_high_cost_relative_to_income,
    has_urgent_savings_goal,
    total_planned_monthly_savings,
    is_long_term_want,
    is_recent_want,
    is_rushed,
    is_emotional,
    balance_after_purchase,
    safe_buffer,
)
from .insights import generate_insights
from .verdict import calculate_verdict_score, score_to_verdict
from .engine import evaluate, explain_evaluation

__all__ = [
    # Settings
    "EngineSettings",
    "engine_settings",
    # Models
    "Currency",
    "Language",
    "FeelEmoji",
    "TimingEmoji",
    "HelpEmoji",
    "Verdict",
    "InsightKind",
    "UserProfile",
    "SavingsPlan",
    "PurchaseQuestionnaire",
    "EvaluationResult",
    # Classifiers
    "is_work_study_project",
    "is_high_cost_relative_to_income",
    "has_urgent_savings_goal",
    "total_planned_monthly_savings",
    "is_long_term_want",
    "is_recent_want",
    "is_rushed",
    "is_emotional",
    "balance_after_purchase",
    "safe_buffer",
    # Insights
    "generate_insights",
    # Verdict
    "calculate_verdict_score",
    "score_to_verdict",
    # Engine
    "evaluate",
    "explain_evaluation",
]
