"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.participant_schemas import (
    ParticipantCreate,
    MealUpdateRequest,
    MealStateResponse,
    ParticipantResponse,
    MobileParticipantResponse,
    StatsResponse,
    ResetAllResponse,
    MealSchemaResponse,
    AdminLoginRequest,
    AdminLoginResponse,
    AdminUser,
)

__all__ = [
    # Participant schemas
    "ParticipantCreate",
    "MealUpdateRequest",
    "MealStateResponse",
    "ParticipantResponse",
    "MobileParticipantResponse",
    # Admin schemas
    "StatsResponse",
    "ResetAllResponse",
    "MealSchemaResponse",
    "AdminLoginRequest",
    "AdminLoginResponse",
    "AdminUser",
]
