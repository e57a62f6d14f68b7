"""
Domain Interfaces (Ports)
"""

from .repositories import PurchaseRecordRepository

__all__ = [
    "PurchaseRecordRepository",
]
