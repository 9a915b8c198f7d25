"""Participant lookup, meal marking and registration routes"""

from fastapi import APIRouter, Depends, status
import logging
from typing import List

from api.dependencies import get_caller_is_admin, get_store
from domain.mappers import ParticipantMapper
from domain.schemas.participant_schemas import (
    MealUpdateRequest,
    MobileParticipantResponse,
    ParticipantCreate,
    ParticipantResponse,
)
from repositories.base import EntitlementStore
from services import EntitlementService

router = APIRouter(tags=["Participants"])
logger = logging.getLogger("foodcourt.api.participants")


@router.get("/participant/{email}", response_model=ParticipantResponse)
def get_participant(email: str, store: EntitlementStore = Depends(get_store)):
    """Look up a participant by the email scanned from their badge."""
    record = EntitlementService.get_participant(store, email)
    return ParticipantMapper.to_response(record)


@router.get("/mobile/participant/{email}", response_model=MobileParticipantResponse)
def get_participant_mobile(email: str, store: EntitlementStore = Depends(get_store)):
    """Compact participant view for handheld scanners."""
    record = EntitlementService.get_participant(store, email)
    return ParticipantMapper.to_mobile_response(record)


@router.put("/participant/{email}/meal", response_model=ParticipantResponse)
def mark_meal_consumed(
    email: str,
    body: MealUpdateRequest,
    store: EntitlementStore = Depends(get_store),
):
    """
    Mark a meal as consumed.

    Raises:
        400: day or meal type outside the meal schema
        404: participant not found
    """
    record = EntitlementService.mark_consumed(store, email, body.day, body.meal_type)
    return ParticipantMapper.to_response(record)


@router.put("/participant/{email}/reset-meal", response_model=ParticipantResponse)
def reset_meal(
    email: str,
    body: MealUpdateRequest,
    store: EntitlementStore = Depends(get_store),
    caller_is_admin: bool = Depends(get_caller_is_admin),
):
    """Return a single meal to the unconsumed state (admin)."""
    record = EntitlementService.reset_meal(
        store, email, body.day, body.meal_type, caller_is_admin
    )
    return ParticipantMapper.to_response(record)


@router.get("/participants", response_model=List[ParticipantResponse])
def list_participants(
    store: EntitlementStore = Depends(get_store),
    caller_is_admin: bool = Depends(get_caller_is_admin),
):
    """All participants, newest first (admin)."""
    records = EntitlementService.list_participants(store, caller_is_admin)
    return [ParticipantMapper.to_response(r) for r in records]


@router.post(
    "/participant",
    response_model=ParticipantResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_participant(
    participant: ParticipantCreate,
    store: EntitlementStore = Depends(get_store),
    caller_is_admin: bool = Depends(get_caller_is_admin),
):
    """Register a participant (admin)."""
    record = EntitlementService.register_participant(
        store,
        participant.email,
        participant.name,
        participant.mobile,
        caller_is_admin,
    )
    return ParticipantMapper.to_response(record)
