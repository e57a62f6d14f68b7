"""Application services (use cases)."""

from .evaluation_service import EvaluationService

__all__ = [
    "EvaluationService",
]
