"""
Participant Repository - MongoDB-backed EntitlementStore.

Meal cells are updated with a single dotted-path ``$set`` so the server applies
each change to one field of one document atomically; records are never written
back whole.
"""

from typing import Any, Dict, List
import logging

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from adapters import mongo_adapter
from app.exceptions import ConflictError, InvalidSlotError, NotFoundError
from domain.mappers import ParticipantMapper
from domain.models import MEAL_SCHEMA, MealState, ParticipantRecord
from repositories.base import EntitlementStore

logger = logging.getLogger("foodcourt.repositories.participants")

_NO_ID = {"_id": 0}


def meal_path(day: str, slot: str) -> str:
    return f"meals.{day}.{slot}"


def reset_all_update() -> Dict[str, Any]:
    """``$set`` document returning every schema cell to the unconsumed state."""
    cleared = ParticipantMapper.meal_to_document(MealState.not_consumed())
    return {
        "$set": {meal_path(day, slot): dict(cleared) for day, slot in MEAL_SCHEMA.cells()}
    }


class MongoParticipantRepository(EntitlementStore):
    """EntitlementStore over a pymongo collection with a unique identity index."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def ensure_indexes(self) -> None:
        """Create the unique identity index and the listing index"""
        with mongo_adapter.store_errors("ensure_indexes"):
            self.collection.create_index(
                [("identity", ASCENDING)], unique=True, name="identity_unique"
            )
            self.collection.create_index(
                [("created_at", DESCENDING)], name="created_at_desc"
            )

    def insert(self, record: ParticipantRecord) -> ParticipantRecord:
        doc = ParticipantMapper.to_document(record)
        with mongo_adapter.store_errors("insert"):
            try:
                self.collection.insert_one(doc)
            except DuplicateKeyError as e:
                logger.info("Duplicate registration rejected: %s", record.identity)
                raise ConflictError(
                    "Email already exists", details={"email": record.identity}
                ) from e
        return record

    def get(self, identity: str) -> ParticipantRecord:
        with mongo_adapter.store_errors("get"):
            doc = self.collection.find_one({"identity": identity}, _NO_ID)
        if doc is None:
            raise NotFoundError(
                "Participant not found", details={"email": identity}
            )
        return ParticipantMapper.from_document(doc)

    def mutate_meal(
        self, identity: str, day: str, slot: str, new_state: MealState
    ) -> ParticipantRecord:
        # Day and slot end up in a field path; never let unchecked input through.
        if not MEAL_SCHEMA.is_valid(day, slot):
            raise InvalidSlotError(day, slot, MEAL_SCHEMA.to_dict())

        with mongo_adapter.store_errors("mutate_meal"):
            doc = self.collection.find_one_and_update(
                {"identity": identity},
                {"$set": {meal_path(day, slot): ParticipantMapper.meal_to_document(new_state)}},
                projection=_NO_ID,
                return_document=ReturnDocument.AFTER,
            )
        if doc is None:
            raise NotFoundError(
                "Participant not found", details={"email": identity}
            )
        return ParticipantMapper.from_document(doc)

    def list_all(self) -> List[ParticipantRecord]:
        with mongo_adapter.store_errors("list_all"):
            docs = list(
                self.collection.find({}, _NO_ID).sort(
                    [("created_at", DESCENDING), ("identity", ASCENDING)]
                )
            )
        return [ParticipantMapper.from_document(doc) for doc in docs]

    def reset_all_meals(self) -> int:
        # One update_many: every document is updated atomically on its own,
        # there is no cross-document transaction.
        with mongo_adapter.store_errors("reset_all_meals"):
            result = self.collection.update_many({}, reset_all_update())
        logger.info(
            "Reset meals on %d participants (%d changed)",
            result.matched_count,
            result.modified_count,
        )
        return result.matched_count

    def count(self) -> int:
        with mongo_adapter.store_errors("count"):
            return self.collection.count_documents({})
