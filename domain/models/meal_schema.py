"""
Meal schema - the closed set of days and meal slots participants are entitled to.

Every consumer (record construction, slot validation, bulk reset, statistics)
derives its day/slot vocabulary from a single MealSchema value.
"""

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple


class MealSchema:
    """Immutable mapping of day identifier -> ordered meal slot identifiers."""

    def __init__(self, days: Mapping[str, Sequence[str]]):
        if not days:
            raise ValueError("MealSchema needs at least one day")
        frozen = {}
        for day, slots in days.items():
            slots = tuple(slots)
            if not slots:
                raise ValueError(f"Day {day!r} has no meal slots")
            if len(set(slots)) != len(slots):
                raise ValueError(f"Day {day!r} lists a meal slot twice")
            frozen[day] = slots
        self._days = MappingProxyType(frozen)

    def days(self) -> Tuple[str, ...]:
        return tuple(self._days)

    def valid_slots(self, day: str) -> Tuple[str, ...]:
        """Ordered slots for ``day``; empty tuple when the day is unknown."""
        return self._days.get(day, ())

    def is_valid(self, day: str, slot: str) -> bool:
        return slot in self.valid_slots(day)

    def cells(self) -> Iterator[Tuple[str, str]]:
        """Yield every (day, slot) pair in schema order."""
        for day, slots in self._days.items():
            for slot in slots:
                yield day, slot

    def cell_count(self) -> int:
        return sum(len(slots) for slots in self._days.values())

    def to_dict(self) -> Dict[str, List[str]]:
        return {day: list(slots) for day, slots in self._days.items()}

    def __eq__(self, other) -> bool:
        if not isinstance(other, MealSchema):
            return NotImplemented
        return dict(self._days) == dict(other._days)

    def __hash__(self) -> int:
        return hash(tuple(self._days.items()))

    def __repr__(self) -> str:
        return f"MealSchema({self.to_dict()!r})"


# The conference runs two days; day 2 ends after the evening snack.
MEAL_SCHEMA = MealSchema(
    {
        "day1": ("morningSnack", "lunch", "eveningSnack", "dinner"),
        "day2": ("morningSnack", "lunch", "eveningSnack"),
    }
)
