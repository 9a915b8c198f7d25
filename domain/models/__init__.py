"""
Domain models package - meal schema and participant entities.
"""

from domain.models.meal_schema import MEAL_SCHEMA, MealSchema
from domain.models.participant import (
    MealState,
    ParticipantRecord,
    empty_meals,
    is_valid_identity,
    new_participant,
    to_store_time,
)

__all__ = [
    # Schema
    "MEAL_SCHEMA",
    "MealSchema",
    # Participant
    "MealState",
    "ParticipantRecord",
    "empty_meals",
    "is_valid_identity",
    "new_participant",
    "to_store_time",
]
