"""
API dependencies for dependency injection
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.exceptions import StoreUnavailableError
from repositories.base import AdminStore, EntitlementStore
from services.admin_service import AdminService

_store: Optional[EntitlementStore] = None
_admin_repository: Optional[AdminStore] = None

basic_auth = HTTPBasic(auto_error=False)


def configure(
    store: Optional[EntitlementStore], admin_repository: Optional[AdminStore]
) -> None:
    """Install the repositories used by request handlers (called at startup)."""
    global _store, _admin_repository
    _store = store
    _admin_repository = admin_repository


def get_store() -> EntitlementStore:
    """
    Participant store dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(store: EntitlementStore = Depends(get_store)):
            pass
    """
    if _store is None:
        raise StoreUnavailableError("Participant store not initialized")
    return _store


def get_admin_repository() -> AdminStore:
    if _admin_repository is None:
        raise StoreUnavailableError("Admin store not initialized")
    return _admin_repository


def get_caller_is_admin(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
    admin_repository: AdminStore = Depends(get_admin_repository),
) -> bool:
    """Resolve HTTP Basic credentials to the admin capability flag."""
    if credentials is None:
        return False
    return AdminService.verify_credentials(
        admin_repository, credentials.username, credentials.password
    )
