"""
Participant domain mappers.
Handles transformation between store documents, domain records and response DTOs.
"""

from typing import Any, Dict

from domain.models import MealState, ParticipantRecord
from domain.schemas.participant_schemas import (
    MealStateResponse,
    MobileParticipantResponse,
    ParticipantResponse,
)


class ParticipantMapper:
    """Mapper for participant-related transformations."""

    @staticmethod
    def meal_to_document(state: MealState) -> Dict[str, Any]:
        return {"consumed": state.consumed, "consumed_at": state.consumed_at}

    @staticmethod
    def to_document(record: ParticipantRecord) -> Dict[str, Any]:
        """
        Convert a ParticipantRecord into the document persisted in MongoDB.

        Args:
            record: Domain record

        Returns:
            Plain dict; meals nested as meals.<day>.<slot>.{consumed, consumed_at}
        """
        return {
            "identity": record.identity,
            "display_name": record.display_name,
            "contact_phone": record.contact_phone,
            "meals": {
                day: {
                    slot: ParticipantMapper.meal_to_document(state)
                    for slot, state in slots.items()
                }
                for day, slots in record.meals.items()
            },
            "created_at": record.created_at,
        }

    @staticmethod
    def from_document(doc: Dict[str, Any]) -> ParticipantRecord:
        """Convert a stored document back into a ParticipantRecord (``_id`` ignored)."""
        meals = {
            day: {
                slot: MealState(
                    consumed=bool(cell.get("consumed", False)),
                    consumed_at=cell.get("consumed_at"),
                )
                for slot, cell in (slots or {}).items()
            }
            for day, slots in (doc.get("meals") or {}).items()
        }
        return ParticipantRecord(
            identity=doc["identity"],
            display_name=doc["display_name"],
            contact_phone=doc["contact_phone"],
            meals=meals,
            created_at=doc["created_at"],
        )

    @staticmethod
    def _meals_response(record: ParticipantRecord):
        return {
            day: {
                slot: MealStateResponse.model_validate(state)
                for slot, state in slots.items()
            }
            for day, slots in record.meals.items()
        }

    @staticmethod
    def to_response(record: ParticipantRecord) -> ParticipantResponse:
        return ParticipantResponse(
            email=record.identity,
            name=record.display_name,
            mobile=record.contact_phone,
            meals=ParticipantMapper._meals_response(record),
            created_at=record.created_at,
        )

    @staticmethod
    def to_mobile_response(record: ParticipantRecord) -> MobileParticipantResponse:
        return MobileParticipantResponse(
            email=record.identity,
            name=record.display_name,
            mobile=record.contact_phone,
            meals=ParticipantMapper._meals_response(record),
        )
