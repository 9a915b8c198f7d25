"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    FoodCourtError,
    ServiceValidationError,
    InvalidSlotError,
    NotFoundError,
    ConflictError,
    UnauthorizedError,
    StoreUnavailableError,
)

__all__ = [
    "settings",
    "FoodCourtError",
    "ServiceValidationError",
    "InvalidSlotError",
    "NotFoundError",
    "ConflictError",
    "UnauthorizedError",
    "StoreUnavailableError",
]
