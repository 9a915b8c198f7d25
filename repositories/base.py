"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional

from domain.models import MealState, ParticipantRecord


class EntitlementStore(ABC):
    """
    Durable participant storage keyed by identity.

    Implementations guarantee:
    - insert() enforces identity uniqueness itself (never via a prior read)
    - mutate_meal() changes exactly one (day, slot) cell atomically, so
      concurrent writes to sibling cells of the same record all persist
    - transient infrastructure failures raise StoreUnavailableError
    """

    @abstractmethod
    def insert(self, record: ParticipantRecord) -> ParticipantRecord:
        """
        Persist a new participant.

        Raises:
            ConflictError: a record with the same identity already exists
        """

    @abstractmethod
    def get(self, identity: str) -> ParticipantRecord:
        """
        Raises:
            NotFoundError: no record with this identity
        """

    @abstractmethod
    def mutate_meal(
        self, identity: str, day: str, slot: str, new_state: MealState
    ) -> ParticipantRecord:
        """
        Atomically replace one meal cell and return the updated record.

        Raises:
            NotFoundError: no record with this identity
            InvalidSlotError: (day, slot) is outside the meal schema
        """

    @abstractmethod
    def list_all(self) -> List[ParticipantRecord]:
        """All records, newest first"""

    @abstractmethod
    def reset_all_meals(self) -> int:
        """Reset every cell of every record; returns the number of records touched"""

    @abstractmethod
    def count(self) -> int:
        """Number of stored participants"""


class AdminStore(ABC):
    """Admin credential records: {username, password_hash, created_at}"""

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        """The admin record, or None when no such username exists"""

    @abstractmethod
    def create_if_absent(
        self, username: str, password_hash: str, now: datetime
    ) -> bool:
        """
        Insert the admin unless the username is taken; must be idempotent.

        Returns:
            True if a record was created
        """
