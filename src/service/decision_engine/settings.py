"""
Engine Settings for the Tarayath Purchase Decision Engine.

This module contains the tunable parameters of the purchase evaluation
heuristic. Defaults reproduce the behaviour the mobile and web clients ship
with; they can be overridden via environment variables for experiments.

Environment variables use the ENGINE_ prefix:
    ENGINE_WASTING_MONEY_COST_RATIO=0.3
    ENGINE_HIGH_COST_RATIO=0.5
    ENGINE_YES_THRESHOLD=3

Usage:
    from src.service.decision_engine.settings import engine_settings

    # Use default settings (loaded from env)
    buffer_months = engine_settings.safe_buffer_months

    # Or create custom settings for testing
    custom = EngineSettings(yes_threshold=4)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """
    Configurable parameters for the purchase decision heuristic.

    All settings can be overridden via environment variables with ENGINE_ prefix.
    Ratios are fractions of monthly income.
    Points are signed contributions to the verdict score.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Keyword Classification ===
    work_study_keywords: List[str] = Field(
        default=["work", "study", "project"],
        description="Substrings of the 'why' answer that mark a productive purchase",
    )
    long_term_keywords: List[str] = Field(
        default=["months"],
        description="Substrings of the 'wanted since' answer that mark a long-held want",
    )
    recent_keywords: List[str] = Field(
        default=["recent"],
        description="Substrings of the 'wanted since' answer that mark a recent want",
    )

    # === Cost Thresholds ===
    wasting_money_cost_ratio: float = Field(
        default=0.3,
        ge=0.0,
        description="Price above this share of income reads as emotional spending",
    )
    high_cost_ratio: float = Field(
        default=0.5,
        ge=0.0,
        description="Price above this share of income is penalised in the verdict",
    )

    # === Liquidity ===
    safe_buffer_months: int = Field(
        default=3,
        ge=0,
        description="Months of income that must remain after the purchase",
    )
    urgent_goal_months: int = Field(
        default=3,
        ge=0,
        description="Active savings plans at or below this duration are urgent",
    )

    # === Verdict Points ===
    work_study_points: int = Field(default=2, description="Added for work/study/project reasons")
    safe_buffer_points: int = Field(default=2, description="Added when the buffer survives")
    long_term_points: int = Field(default=1, description="Added for a long-held want")
    not_rushed_points: int = Field(default=1, description="Added when timing is not 'right now'")
    high_cost_penalty: int = Field(default=2, ge=0, description="Subtracted for high cost")
    urgent_goal_penalty: int = Field(default=1, ge=0, description="Subtracted for urgent goals")
    rushed_penalty: int = Field(default=1, ge=0, description="Subtracted for 'right now' timing")
    recent_want_penalty: int = Field(default=1, ge=0, description="Subtracted for a recent want")

    # === Verdict Thresholds ===
    yes_threshold: int = Field(
        default=3,
        description="Score at or above this is a 'yes'",
    )
    wait_threshold: int = Field(
        default=0,
        description="Score at or above this (and below yes) is a 'wait'; below is a 'no'",
    )

    @field_validator("work_study_keywords", "long_term_keywords", "recent_keywords")
    @classmethod
    def normalize_keywords(cls, v: List[str]) -> List[str]:
        """Lower-case keywords and reject blanks so matching stays case-insensitive."""
        keywords = [k.strip().lower() for k in v]
        if any(not k for k in keywords):
            raise ValueError("Keywords cannot be empty")
        return keywords

    @field_validator("wait_threshold")
    @classmethod
    def validate_thresholds(cls, v: int, info) -> int:
        yes_threshold = info.data.get("yes_threshold")
        if yes_threshold is not None and v > yes_threshold:
            raise ValueError(
                f"wait_threshold ({v}) > yes_threshold ({yes_threshold})"
            )
        return v


@lru_cache
def get_engine_settings() -> EngineSettings:
    """Get cached engine settings instance."""
    return EngineSettings()


engine_settings = get_engine_settings()
