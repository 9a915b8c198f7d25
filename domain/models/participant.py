"""
Participant record - the entity tracked at the food court.

A participant is keyed by email (which is also the barcode payload printed on
the badge) and carries one MealState per (day, slot) cell of the meal schema.
"""

from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from app.exceptions import ServiceValidationError
from domain.models.meal_schema import MEAL_SCHEMA


def to_store_time(value: datetime) -> datetime:
    """
    UTC-aware datetime truncated to milliseconds, the precision MongoDB keeps.

    Naive values are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


class MealState(BaseModel):
    """Consumption state of one cell. consumed_at is set iff consumed is true."""

    consumed: bool = False
    consumed_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @field_validator("consumed_at")
    @classmethod
    def _normalize_consumed_at(cls, v):
        return to_store_time(v) if v is not None else v

    @model_validator(mode="after")
    def _timestamp_matches_flag(self):
        if self.consumed and self.consumed_at is None:
            raise ValueError("consumed meal requires consumed_at")
        if not self.consumed and self.consumed_at is not None:
            raise ValueError("consumed_at must be empty for an unconsumed meal")
        return self

    @classmethod
    def not_consumed(cls) -> "MealState":
        return cls(consumed=False, consumed_at=None)

    @classmethod
    def consumed_on(cls, when: datetime) -> "MealState":
        return cls(consumed=True, consumed_at=when)


class ParticipantRecord(BaseModel):
    """Participant with a complete meal-state mapping."""

    identity: str = Field(..., description="Email address; unique and used as scan payload")
    display_name: str = Field(..., min_length=1)
    contact_phone: str = Field(..., min_length=1)
    meals: Dict[str, Dict[str, MealState]]
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _normalize_created_at(cls, v):
        return to_store_time(v)

    @model_validator(mode="after")
    def _meals_cover_schema(self):
        expected = {day: set(MEAL_SCHEMA.valid_slots(day)) for day in MEAL_SCHEMA.days()}
        actual = {day: set(slots) for day, slots in self.meals.items()}
        if actual != expected:
            raise ValueError("meals must cover exactly the meal schema cells")
        return self

    def meal(self, day: str, slot: str) -> MealState:
        return self.meals[day][slot]

    def consumed_count(self) -> int:
        return sum(
            1 for slots in self.meals.values() for state in slots.values() if state.consumed
        )


def is_valid_identity(identity: Optional[str]) -> bool:
    """Loose email-shape check: an '@' with at least one '.' somewhere after it."""
    if not identity:
        return False
    _, at, domain = identity.partition("@")
    return bool(at) and "." in domain


def empty_meals() -> Dict[str, Dict[str, MealState]]:
    meals: Dict[str, Dict[str, MealState]] = {}
    for day, slot in MEAL_SCHEMA.cells():
        meals.setdefault(day, {})[slot] = MealState.not_consumed()
    return meals


def new_participant(
    identity: str, display_name: str, contact_phone: str, now: datetime
) -> ParticipantRecord:
    """
    Build a fresh participant with every meal cell unconsumed.

    Pure construction; persisting the record is the store's job.

    Raises:
        ServiceValidationError: a field is missing or the identity is not email-shaped
    """
    identity = (identity or "").strip()
    display_name = (display_name or "").strip()
    contact_phone = (contact_phone or "").strip()

    missing = [
        name
        for name, value in (
            ("name", display_name),
            ("mobile", contact_phone),
            ("email", identity),
        )
        if not value
    ]
    if missing:
        raise ServiceValidationError(
            "Name, mobile, and email are required", details={"missing": missing}
        )
    if not is_valid_identity(identity):
        raise ServiceValidationError(
            f"Invalid email address: {identity}", details={"field": "email"}
        )

    return ParticipantRecord(
        identity=identity,
        display_name=display_name,
        contact_phone=contact_phone,
        meals=empty_meals(),
        created_at=now,
    )
