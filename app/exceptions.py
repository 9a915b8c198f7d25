from typing import Any, Mapping, Optional


class FoodCourtError(Exception):
    """Base class for errors reported to API callers.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (missing fields, valid meals)
        code: machine-readable error code, ``default_code`` unless overridden
        http_status: status code used by the API error handlers
    """

    http_status = 500
    default_code = "INTERNAL_SERVER_ERROR"
    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(FoodCourtError):
    """Input failed validation before reaching the store (400)."""

    http_status = 400
    default_code = "INVALID_INPUT"
    default_message = "Invalid input"


class InvalidSlotError(ServiceValidationError):
    """A (day, slot) pair outside the meal schema.

    Details carry the valid schema so clients can recover.
    """

    default_code = "INVALID_SLOT"

    def __init__(self, day: Any, slot: Any, valid_meals: Optional[Mapping[str, Any]] = None):
        super().__init__(
            f"Invalid day or meal type: {day}/{slot}",
            details={"day": day, "meal_type": slot, "valid_meals": valid_meals or {}},
        )
        self.day = day
        self.slot = slot


class NotFoundError(FoodCourtError):
    http_status = 404
    default_code = "PARTICIPANT_NOT_FOUND"
    default_message = "Participant not found"


class ConflictError(FoodCourtError):
    """Identity already registered (409)."""

    http_status = 409
    default_code = "DUPLICATE_IDENTITY"
    default_message = "Email already exists"


class UnauthorizedError(FoodCourtError):
    http_status = 401
    default_code = "UNAUTHORIZED"
    default_message = "Authentication required"


class StoreUnavailableError(FoodCourtError):
    """The participant store timed out or the connection was lost (503).

    Callers may retry; nothing is retried internally.
    """

    http_status = 503
    default_code = "STORE_UNAVAILABLE"
    default_message = "Participant store unavailable"
