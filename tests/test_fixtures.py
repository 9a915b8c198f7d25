"""
Shared test fixtures and utilities for the FoodCourt test suite.

This module contains factories for participant records, in-memory repositories
and the API test client, reused across test files to keep data consistent.
"""

import uuid
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from api import dependencies
from domain.models import ParticipantRecord, new_participant
from main import app
from repositories import InMemoryAdminRepository, InMemoryParticipantRepository
from services.admin_service import AdminService
from test_constants import (
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    EVENT_START,
    REALISTIC_PARTICIPANTS,
    TEST_BCRYPT_ROUNDS,
)

# TestClient without a context manager: the lifespan (MongoDB connect) never runs.
client = TestClient(app, raise_server_exceptions=False)

ADMIN_AUTH = (ADMIN_USERNAME, ADMIN_PASSWORD)


def unique_email(prefix: str = "attendee") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4().hex[:8]}@example.com"


def make_participant(
    profile: str = "alice",
    email: str = None,
    created_at: datetime = EVENT_START,
) -> ParticipantRecord:
    """
    Build a fresh ParticipantRecord from a realistic profile.

    Args:
        profile: Key into REALISTIC_PARTICIPANTS
        email: Identity; a unique address is generated when omitted
        created_at: Registration time

    Example:
        >>> record = make_participant("priya")
        >>> record.display_name
        'Priya Raman'
    """
    data = REALISTIC_PARTICIPANTS[profile]
    return new_participant(
        email or unique_email(data["email_prefix"]),
        data["display_name"],
        data["contact_phone"],
        created_at,
    )


def registration_payload(profile: str = "alice", email: str = None) -> dict:
    """JSON body for POST /api/participant"""
    data = REALISTIC_PARTICIPANTS[profile]
    return {
        "name": data["display_name"],
        "mobile": data["contact_phone"],
        "email": email or unique_email(data["email_prefix"]),
    }


@pytest.fixture
def store() -> InMemoryParticipantRepository:
    """Empty in-memory participant store"""
    return InMemoryParticipantRepository()


@pytest.fixture
def admin_repository() -> InMemoryAdminRepository:
    """In-memory admin store holding the bootstrap admin"""
    repo = InMemoryAdminRepository()
    AdminService.ensure_default_admin(
        repo, ADMIN_USERNAME, ADMIN_PASSWORD, rounds=TEST_BCRYPT_ROUNDS
    )
    return repo


@pytest.fixture
def api(store, admin_repository):
    """API client wired to the in-memory repositories"""
    dependencies.configure(store, admin_repository)
    try:
        yield client
    finally:
        dependencies.configure(None, None)
