"""In-memory participant repository.

Dictionary-backed EntitlementStore used by the test suite and by the
``inmemory`` backend. A single lock makes insert a check-and-insert and keeps
cell updates from overwriting each other; records handed out are copies.
"""

from copy import deepcopy
from threading import Lock
from typing import Dict, List

from app.exceptions import ConflictError, InvalidSlotError, NotFoundError
from domain.models import MEAL_SCHEMA, MealState, ParticipantRecord, empty_meals
from repositories.base import EntitlementStore


class InMemoryParticipantRepository(EntitlementStore):
    """
    Thread-safe in-memory EntitlementStore.

    Persistence: Data lost on process restart (in-memory only)
    """

    def __init__(self) -> None:
        self._storage: Dict[str, ParticipantRecord] = {}
        self._lock = Lock()

    def insert(self, record: ParticipantRecord) -> ParticipantRecord:
        with self._lock:
            if record.identity in self._storage:
                raise ConflictError(
                    "Email already exists", details={"email": record.identity}
                )
            self._storage[record.identity] = deepcopy(record)
        return deepcopy(record)

    def get(self, identity: str) -> ParticipantRecord:
        with self._lock:
            record = self._storage.get(identity)
            if record is None:
                raise NotFoundError(
                    "Participant not found", details={"email": identity}
                )
            return deepcopy(record)

    def mutate_meal(
        self, identity: str, day: str, slot: str, new_state: MealState
    ) -> ParticipantRecord:
        if not MEAL_SCHEMA.is_valid(day, slot):
            raise InvalidSlotError(day, slot, MEAL_SCHEMA.to_dict())

        with self._lock:
            record = self._storage.get(identity)
            if record is None:
                raise NotFoundError(
                    "Participant not found", details={"email": identity}
                )
            meals = {d: dict(slots) for d, slots in record.meals.items()}
            meals[day][slot] = new_state
            updated = record.model_copy(update={"meals": meals})
            self._storage[identity] = updated
            return deepcopy(updated)

    def list_all(self) -> List[ParticipantRecord]:
        with self._lock:
            records = [deepcopy(r) for r in self._storage.values()]
        records.sort(key=lambda r: r.identity)
        records.sort(key=lambda r: r.created_at, reverse=True)
        return records

    def reset_all_meals(self) -> int:
        with self._lock:
            for identity, record in self._storage.items():
                self._storage[identity] = record.model_copy(update={"meals": empty_meals()})
            return len(self._storage)

    def count(self) -> int:
        with self._lock:
            return len(self._storage)

