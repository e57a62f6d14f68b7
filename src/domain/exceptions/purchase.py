"""Purchase-related domain exceptions."""

from .base import DomainException


class PurchaseRecordNotFoundException(DomainException):
    """Raised when a purchase record cannot be found."""

    def __init__(self, record_id: str):
        super().__init__(
            message=f"Purchase record not found: {record_id}",
            code="PURCHASE_NOT_FOUND",
        )
        self.record_id = record_id


class InvalidEvaluationRequestException(DomainException):
    """Raised when an evaluation request is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_EVALUATION_REQUEST",
        )
