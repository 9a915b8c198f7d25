"""MongoDB adapter for participant and admin storage.
"""

from contextlib import contextmanager
from typing import Optional
import logging

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, ExecutionTimeout, PyMongoError, WTimeoutError

from app.exceptions import StoreUnavailableError

logger = logging.getLogger("foodcourt.mongo")

_client: Optional[MongoClient] = None
_db: Optional[Database] = None

# Timeouts, lost connections and failed server selection; all retryable by callers.
TRANSIENT_ERRORS = (ConnectionFailure, ExecutionTimeout, WTimeoutError)


# ------------------ Connection ------------------
def connect(
    uri: str,
    db_name: str = "foodcourt",
    server_selection_timeout_ms: int = 5000,
    socket_timeout_ms: int = 45000,
) -> Database:
    """Open the client and verify the server answers a ping.

    Raises:
        StoreUnavailableError: if the server cannot be reached
    """
    global _client, _db
    client = MongoClient(
        uri,
        serverSelectionTimeoutMS=server_selection_timeout_ms,
        socketTimeoutMS=socket_timeout_ms,
        tz_aware=True,
    )
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        logger.warning("Could not reach MongoDB (database: %s): %s", db_name, exc)
        raise StoreUnavailableError(f"MongoDB unreachable: {exc}") from exc

    _client = client
    _db = client[db_name]
    logger.info("Connected to MongoDB (database: %s)", db_name)
    return _db


def get_db() -> Database:
    """Return the connected database.

    Raises:
        StoreUnavailableError: if connect() has not succeeded
    """
    if _db is None:
        raise StoreUnavailableError("MongoDB connection not initialized")
    return _db


def is_connected() -> bool:
    """Ping the server; False when disconnected or unreachable."""
    if _client is None:
        return False
    try:
        _client.admin.command("ping")
        return True
    except PyMongoError:
        logger.warning("MongoDB ping failed")
        return False


def close():
    """Close MongoDB connection."""
    global _client, _db
    try:
        if _client is not None:
            _client.close()
            logger.info("MongoDB client closed")
    except Exception:
        logger.exception("Error closing MongoDB client")
    finally:
        _client = None
        _db = None


@contextmanager
def store_errors(operation: str):
    """Translate transient driver failures into StoreUnavailableError."""
    try:
        yield
    except TRANSIENT_ERRORS as exc:
        logger.error("MongoDB %s failed: %s", operation, exc)
        raise StoreUnavailableError(
            f"Participant store unavailable during {operation}"
        ) from exc
