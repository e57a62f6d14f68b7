"""Repository implementations."""

from .purchase_repository import PostgresPurchaseRecordRepository

__all__ = [
    "PostgresPurchaseRecordRepository",
]
