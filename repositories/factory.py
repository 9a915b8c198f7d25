"""Repository Factory for Persistence Layer.

Backend selection via ``settings.repository_backend``:
- mongodb: participants and admin credentials in MongoDB (production)
- inmemory: dictionaries in process memory (tests, local demos)
"""

import logging
from typing import Tuple

from adapters import mongo_adapter
from app.config import RepositoryBackend, Settings
from repositories.admin_repository import InMemoryAdminRepository, MongoAdminRepository
from repositories.base import AdminStore, EntitlementStore
from repositories.in_memory_participant_repository import InMemoryParticipantRepository
from repositories.participant_repository import MongoParticipantRepository

logger = logging.getLogger("foodcourt.repositories.factory")


def create_repositories(settings: Settings) -> Tuple[EntitlementStore, AdminStore]:
    """Build the participant store and admin repository for the configured backend.

    Raises:
        StoreUnavailableError: mongodb selected and the server is unreachable
    """
    if settings.repository_backend == RepositoryBackend.INMEMORY:
        logger.info("Using in-memory repositories")
        return InMemoryParticipantRepository(), InMemoryAdminRepository()

    db = mongo_adapter.connect(
        settings.mongo_uri,
        settings.mongo_db_name,
        server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
        socket_timeout_ms=settings.mongo_socket_timeout_ms,
    )
    store = MongoParticipantRepository(db[settings.mongo_participants_collection])
    admins = MongoAdminRepository(db[settings.mongo_admins_collection])
    store.ensure_indexes()
    admins.ensure_indexes()
    logger.info("Using MongoDB repositories")
    return store, admins
