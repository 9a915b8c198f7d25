"""
Repositories package - Data access layer.
"""

from repositories.base import AdminStore, EntitlementStore
from repositories.participant_repository import MongoParticipantRepository
from repositories.in_memory_participant_repository import InMemoryParticipantRepository
from repositories.admin_repository import MongoAdminRepository, InMemoryAdminRepository

__all__ = [
    "AdminStore",
    "EntitlementStore",
    "MongoParticipantRepository",
    "InMemoryParticipantRepository",
    "MongoAdminRepository",
    "InMemoryAdminRepository",
]
