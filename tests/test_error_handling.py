"""
Error handling and edge case tests.

This test suite covers how failures reach callers:
- each domain error maps to its own HTTP status and code
- transient store failures surface as 503 STORE_UNAVAILABLE with Retry-After
- uninitialized store at request time
- request shape errors and unknown routes
- exception payloads
"""

import pytest

from api import dependencies
from app.config import settings
from app.exceptions import (
    ConflictError,
    InvalidSlotError,
    NotFoundError,
    ServiceValidationError,
    StoreUnavailableError,
    UnauthorizedError,
)
from domain.models import MEAL_SCHEMA
from repositories import InMemoryParticipantRepository
from test_fixtures import ADMIN_AUTH, admin_repository, api, client, store

PREFIX = settings.api_prefix


class UnavailableStore(InMemoryParticipantRepository):
    """Store whose backing server has gone away"""

    def _down(self, *args, **kwargs):
        raise StoreUnavailableError("Participant store unavailable during get")

    get = _down
    mutate_meal = _down
    list_all = _down
    insert = _down
    reset_all_meals = _down


# =============================================================================
# EXCEPTION PAYLOADS
# =============================================================================


@pytest.mark.parametrize(
    "exc,status,code",
    [
        (ServiceValidationError(), 400, "INVALID_INPUT"),
        (InvalidSlotError("day3", "lunch"), 400, "INVALID_SLOT"),
        (NotFoundError(), 404, "PARTICIPANT_NOT_FOUND"),
        (ConflictError(), 409, "DUPLICATE_IDENTITY"),
        (UnauthorizedError(), 401, "UNAUTHORIZED"),
        (StoreUnavailableError(), 503, "STORE_UNAVAILABLE"),
    ],
)
def test_each_error_kind_has_distinct_status_and_code(exc, status, code):
    assert exc.http_status == status
    assert exc.code == code
    assert exc.to_dict()["code"] == code


def test_invalid_slot_is_a_validation_error():
    exc = InvalidSlotError("day1", "brunch", MEAL_SCHEMA.to_dict())
    assert isinstance(exc, ServiceValidationError)
    assert exc.details["valid_meals"]["day1"][0] == "morningSnack"
    assert "day1/brunch" in str(exc)


def test_explicit_code_overrides_default():
    exc = UnauthorizedError("Invalid credentials", code="INVALID_CREDENTIALS")
    assert exc.to_dict() == {"message": "Invalid credentials", "code": "INVALID_CREDENTIALS"}


# =============================================================================
# STORE FAILURES
# =============================================================================


@pytest.fixture
def down_api(admin_repository):
    dependencies.configure(UnavailableStore(), admin_repository)
    try:
        yield client
    finally:
        dependencies.configure(None, None)


def test_lookup_when_store_down(down_api):
    response = down_api.get(f"{PREFIX}/participant/alice@example.com")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"
    assert response.headers["Retry-After"] == "1"


def test_mark_meal_when_store_down(down_api):
    response = down_api.put(
        f"{PREFIX}/participant/alice@example.com/meal",
        json={"day": "day1", "mealType": "lunch"},
    )
    assert response.status_code == 503


def test_invalid_slot_reported_even_when_store_down(down_api):
    """Schema validation happens before any store access"""
    response = down_api.put(
        f"{PREFIX}/participant/alice@example.com/meal",
        json={"day": "day3", "mealType": "lunch"},
    )
    assert response.status_code == 400


def test_admin_routes_when_store_down(down_api):
    assert down_api.get(f"{PREFIX}/stats", auth=ADMIN_AUTH).status_code == 503
    assert down_api.put(f"{PREFIX}/reset-meals", auth=ADMIN_AUTH).status_code == 503


def test_requests_before_store_initialized():
    dependencies.configure(None, None)

    response = client.get(f"{PREFIX}/participant/alice@example.com")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"


# =============================================================================
# REQUEST SHAPE AND ROUTING
# =============================================================================


def test_mark_meal_without_body(api):
    response = api.put(f"{PREFIX}/participant/alice@example.com/meal")

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_unknown_route(api):
    response = api.get(f"{PREFIX}/no-such-endpoint")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "ROUTE_NOT_FOUND"


def test_error_envelope_shape(api):
    body = api.get(f"{PREFIX}/participant/ghost@example.com").json()

    assert body["success"] is False
    assert set(body["error"]) >= {"code", "message"}
    assert "timestamp" in body


def test_malformed_basic_auth_is_unauthorized(api, store):
    response = api.get(
        f"{PREFIX}/participants", headers={"Authorization": "Basic not-base64!"}
    )
    assert response.status_code == 401
