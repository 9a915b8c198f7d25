"""
Domain layer - Business entities, schemas, and mappers.
"""

from domain import models, schemas

__all__ = ["models", "schemas"]
