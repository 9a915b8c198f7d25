"""
Admin Repository - Data access for the admin credential record.
"""

from datetime import datetime
from threading import Lock
from typing import Any, Dict, Optional

from pymongo import ASCENDING
from pymongo.collection import Collection

from adapters import mongo_adapter
from repositories.base import AdminStore


class MongoAdminRepository(AdminStore):
    """Admin credentials stored as {username, password_hash, created_at} documents"""

    def __init__(self, collection: Collection):
        self.collection = collection

    def ensure_indexes(self) -> None:
        with mongo_adapter.store_errors("ensure_indexes"):
            self.collection.create_index(
                [("username", ASCENDING)], unique=True, name="username_unique"
            )

    def get_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        with mongo_adapter.store_errors("get_admin"):
            return self.collection.find_one({"username": username}, {"_id": 0})

    def create_if_absent(
        self, username: str, password_hash: str, now: datetime
    ) -> bool:
        """Insert the admin unless one with this username exists.

        Returns:
            True if a record was created
        """
        with mongo_adapter.store_errors("create_admin"):
            result = self.collection.update_one(
                {"username": username},
                {
                    "$setOnInsert": {
                        "username": username,
                        "password_hash": password_hash,
                        "created_at": now,
                    }
                },
                upsert=True,
            )
        return result.upserted_id is not None


class InMemoryAdminRepository(AdminStore):
    """Dictionary-backed admin credentials for tests and the inmemory backend"""

    def __init__(self) -> None:
        self._admins: Dict[str, Dict[str, Any]] = {}
        self._lock = Lock()

    def get_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            admin = self._admins.get(username)
            return dict(admin) if admin else None

    def create_if_absent(
        self, username: str, password_hash: str, now: datetime
    ) -> bool:
        with self._lock:
            if username in self._admins:
                return False
            self._admins[username] = {
                "username": username,
                "password_hash": password_hash,
                "created_at": now,
            }
            return True
