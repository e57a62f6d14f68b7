"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .purchase import (
    InvalidEvaluationRequestException,
    PurchaseRecordNotFoundException,
)

__all__ = [
    "DomainException",
    "InvalidEvaluationRequestException",
    "PurchaseRecordNotFoundException",
]
