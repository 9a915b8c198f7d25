"""API routes package"""

from api.routes import admin, health, participants

__all__ = ["admin", "health", "participants"]
