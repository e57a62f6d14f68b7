"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import PurchaseRecord


class PurchaseRecordRepository(ABC):
    """
    Abstract repository for PurchaseRecord persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, record: PurchaseRecord) -> PurchaseRecord:
        """
        Persist a new purchase record.

        Args:
            record: The record to save

        Returns:
            The saved record
        """
        ...

    @abstractmethod
    async def update(self, record: PurchaseRecord) -> PurchaseRecord:
        """
        Update the mutable fields (purchased flag and time) of a record.

        Args:
            record: The record to update

        Returns:
            The updated record

        Raises:
            PurchaseRecordNotFoundException: If the record doesn't exist
        """
        ...

    @abstractmethod
    async def get_by_id(self, record_id: UUID) -> Optional[PurchaseRecord]:
        """
        Retrieve a record by ID.

        Args:
            record_id: The record's unique identifier

        Returns:
            The record if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_user_id(
        self,
        user_id: str,
        limit: int = 10,
        offset: int = 0,
    ) -> List[PurchaseRecord]:
        """
        Retrieve records for a user.

        Args:
            user_id: The user's identifier
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of records, ordered by created_at descending
        """
        ...

    @abstractmethod
    async def delete_by_user_id(self, user_id: str) -> int:
        """
        Delete every record of a user.

        Args:
            user_id: The user's identifier

        Returns:
            Number of records deleted
        """
        ...
