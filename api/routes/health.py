"""Health check and utility routes"""

from datetime import datetime, timezone

from fastapi import APIRouter
import logging

from adapters import mongo_adapter
from app.config import RepositoryBackend, settings
from domain.models import MEAL_SCHEMA
from domain.schemas.participant_schemas import MealSchemaResponse

router = APIRouter(tags=["Health"])
logger = logging.getLogger("foodcourt.api.health")


@router.get("/health")
def health_check():
    """Liveness plus store connectivity"""
    if settings.repository_backend == RepositoryBackend.MONGODB:
        database = "connected" if mongo_adapter.is_connected() else "disconnected"
    else:
        database = "connected"
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "backend": settings.repository_backend.value,
        "database": database,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/meal-schema", response_model=MealSchemaResponse)
def meal_schema():
    """The days and meal slots that can be marked"""
    return MealSchemaResponse(
        days=list(MEAL_SCHEMA.days()),
        valid_meals=MEAL_SCHEMA.to_dict(),
        cell_count=MEAL_SCHEMA.cell_count(),
    )
