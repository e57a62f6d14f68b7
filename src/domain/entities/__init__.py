"""Domain Entities - Core business objects."""

from .purchase import PurchaseRecord, format_timestamp

__all__ = [
    "PurchaseRecord",
    "format_timestamp",
]
