"""
Admin gateway - verifies admin credentials and reduces them to a capability flag.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
import logging

import bcrypt

from app.exceptions import ServiceValidationError, UnauthorizedError
from repositories.base import AdminStore

logger = logging.getLogger("foodcourt.admin")


class AdminService:
    @staticmethod
    def hash_password(password: str, rounds: int = 12) -> str:
        """Hash password using bcrypt"""
        salt = bcrypt.gensalt(rounds=rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def verify_password(password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            logger.error("Admin password hash is malformed")
            return False

    @staticmethod
    def ensure_default_admin(
        repo: AdminStore, username: str, password: str, rounds: int = 12
    ) -> bool:
        """
        Create the bootstrap admin unless it already exists.

        Returns:
            True if the admin was created by this call
        """
        if repo.get_by_username(username) is not None:
            logger.info("Admin user already exists")
            return False
        created = repo.create_if_absent(
            username,
            AdminService.hash_password(password, rounds),
            datetime.now(timezone.utc),
        )
        if created:
            logger.info(f"Default admin created: {username}")
        return created

    @staticmethod
    def verify_credentials(
        repo: AdminStore, username: Optional[str], password: Optional[str]
    ) -> bool:
        """True when the username exists and the password matches its hash"""
        if not username or not password:
            return False
        admin = repo.get_by_username(username)
        if admin is None:
            return False
        return AdminService.verify_password(password, admin["password_hash"])

    @staticmethod
    def login(
        repo: AdminStore, username: Optional[str], password: Optional[str]
    ) -> Dict[str, Any]:
        """
        Check admin credentials for an explicit login request.

        Raises:
            ServiceValidationError: username or password missing
            UnauthorizedError: credentials do not match
        """
        if not username or not password:
            raise ServiceValidationError("Username and password are required")
        if not AdminService.verify_credentials(repo, username, password):
            logger.warning(f"Failed admin login for {username}")
            raise UnauthorizedError("Invalid credentials", code="INVALID_CREDENTIALS")
        return {"username": username}
