from datetime import datetime, timezone
from typing import List, Optional
import logging

from app.exceptions import InvalidSlotError, UnauthorizedError
from domain.models import (
    MEAL_SCHEMA,
    MealState,
    ParticipantRecord,
    new_participant,
    to_store_time,
)
from domain.schemas.participant_schemas import StatsResponse
from repositories.base import EntitlementStore

logger = logging.getLogger("foodcourt.entitlements")


def _utcnow() -> datetime:
    return to_store_time(datetime.now(timezone.utc))


class EntitlementService:
    """
    Meal entitlement operations.

    Every call re-reads or mutates the store directly; nothing is cached between
    calls and nothing is retried. Privileged operations take an explicit
    ``caller_is_admin`` flag resolved at the boundary.
    """

    @staticmethod
    def require_admin(caller_is_admin: bool, operation: str) -> None:
        if not caller_is_admin:
            logger.warning(f"Rejected unauthorized {operation}")
            raise UnauthorizedError(
                "Authentication required", details={"operation": operation}
            )

    @staticmethod
    def validate_slot(day: str, slot: str) -> None:
        """
        Check (day, slot) against the meal schema before any store access.

        Raises:
            InvalidSlotError: day unknown or slot not served on that day
        """
        if not MEAL_SCHEMA.is_valid(day, slot):
            raise InvalidSlotError(day, slot, MEAL_SCHEMA.to_dict())

    @staticmethod
    def register_participant(
        store: EntitlementStore,
        identity: str,
        display_name: str,
        contact_phone: str,
        caller_is_admin: bool,
        now: Optional[datetime] = None,
    ) -> ParticipantRecord:
        """
        Register a participant with every meal unconsumed.

        Args:
            store: Participant store
            identity: Email address (badge barcode payload)
            display_name: Name printed on the badge
            contact_phone: Phone number
            caller_is_admin: Whether the caller holds the admin capability
            now: Creation time; defaults to the current UTC time. Stored as UTC
                with millisecond precision, naive values are read as UTC

        Returns:
            The stored ParticipantRecord

        Raises:
            UnauthorizedError: caller is not admin
            ServiceValidationError: missing field or malformed email
            ConflictError: identity already registered
        """
        EntitlementService.require_admin(caller_is_admin, "register_participant")
        record = new_participant(
            identity,
            display_name,
            contact_phone,
            to_store_time(now) if now is not None else _utcnow(),
        )
        stored = store.insert(record)
        logger.info(f"Registered participant {stored.identity}")
        return stored

    @staticmethod
    def get_participant(store: EntitlementStore, identity: str) -> ParticipantRecord:
        """Look up a participant by email. Public: the scan flow needs it."""
        return store.get((identity or "").strip())

    @staticmethod
    def list_participants(
        store: EntitlementStore, caller_is_admin: bool
    ) -> List[ParticipantRecord]:
        """All participants, newest first (admin only)"""
        EntitlementService.require_admin(caller_is_admin, "list_participants")
        return store.list_all()

    @staticmethod
    def mark_consumed(
        store: EntitlementStore,
        identity: str,
        day: str,
        slot: str,
        now: Optional[datetime] = None,
    ) -> ParticipantRecord:
        """
        Mark one meal as consumed at ``now``.

        Marking an already-consumed meal is not an error: the timestamp is
        overwritten, so consumed_at always records the latest scan.

        Raises:
            InvalidSlotError: (day, slot) outside the meal schema
            NotFoundError: no participant with this identity
        """
        EntitlementService.validate_slot(day, slot)
        when = to_store_time(now) if now is not None else _utcnow()
        record = store.mutate_meal(
            (identity or "").strip(), day, slot, MealState.consumed_on(when)
        )
        logger.info(f"Meal consumed: {record.identity} {day}/{slot}")
        return record

    @staticmethod
    def reset_meal(
        store: EntitlementStore,
        identity: str,
        day: str,
        slot: str,
        caller_is_admin: bool,
    ) -> ParticipantRecord:
        """
        Return one meal to the unconsumed state (admin only).

        Raises:
            UnauthorizedError: caller is not admin
            InvalidSlotError: (day, slot) outside the meal schema
            NotFoundError: no participant with this identity
        """
        EntitlementService.require_admin(caller_is_admin, "reset_meal")
        EntitlementService.validate_slot(day, slot)
        record = store.mutate_meal(
            (identity or "").strip(), day, slot, MealState.not_consumed()
        )
        logger.info(f"Meal reset: {record.identity} {day}/{slot}")
        return record

    @staticmethod
    def reset_all_meals(store: EntitlementStore, caller_is_admin: bool) -> int:
        """Reset every meal of every participant; returns records touched (admin only)"""
        EntitlementService.require_admin(caller_is_admin, "reset_all_meals")
        touched = store.reset_all_meals()
        logger.info(f"All meals reset across {touched} participants")
        return touched

    @staticmethod
    def compute_stats(store: EntitlementStore, caller_is_admin: bool) -> StatsResponse:
        """
        Aggregate consumption across participants (admin only).

        Figures come from a single listing read; each record's cells are read
        together, records may be slightly stale relative to each other.
        """
        EntitlementService.require_admin(caller_is_admin, "compute_stats")
        records = store.list_all()
        total_participants = len(records)
        return StatsResponse(
            total_participants=total_participants,
            total_meals_consumed=sum(r.consumed_count() for r in records),
            total_possible_meals=total_participants * MEAL_SCHEMA.cell_count(),
        )
