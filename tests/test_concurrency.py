"""
Concurrency tests for the entitlement store.

Several scanning stations hit the service at once. These tests drive the
in-memory store from a thread pool and check:
- concurrent marks on different cells of one record all persist
- concurrent registrations of one email leave exactly one record
- concurrent mark/reset on the same cell ends in one of the two requested states
"""

from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

import pytest

from app.exceptions import ConflictError
from domain.models import MealState
from repositories import InMemoryParticipantRepository
from services import EntitlementService
from test_constants import ALL_CELLS, EVENT_START, SCAN_TIMES
from test_fixtures import make_participant, store


def test_concurrent_marks_on_different_cells_all_persist(store: InMemoryParticipantRepository):
    """Seven stations each scan a different meal for the same badge at once"""
    store.insert(make_participant("alice", email="alice@example.com"))
    barrier = Barrier(len(ALL_CELLS))

    def scan(cell):
        day, slot = cell
        barrier.wait()
        return EntitlementService.mark_consumed(
            store, "alice@example.com", day, slot, SCAN_TIMES[cell]
        )

    with ThreadPoolExecutor(max_workers=len(ALL_CELLS)) as pool:
        results = list(pool.map(scan, ALL_CELLS))

    assert len(results) == len(ALL_CELLS)
    final = store.get("alice@example.com")
    for day, slot in ALL_CELLS:
        assert final.meal(day, slot) == MealState.consumed_on(SCAN_TIMES[(day, slot)])


def test_two_concurrent_marks_on_sibling_cells(store: InMemoryParticipantRepository):
    store.insert(make_participant("priya", email="priya@example.com"))
    barrier = Barrier(2)

    def scan(cell):
        barrier.wait()
        EntitlementService.mark_consumed(store, "priya@example.com", *cell, EVENT_START)

    cells = [("day1", "lunch"), ("day1", "dinner")]
    for _ in range(25):
        with ThreadPoolExecutor(max_workers=2) as pool:
            list(pool.map(scan, cells))
        final = store.get("priya@example.com")
        assert final.meal("day1", "lunch").consumed
        assert final.meal("day1", "dinner").consumed
        store.reset_all_meals()


def test_concurrent_duplicate_registration(store: InMemoryParticipantRepository):
    """Two admin desks register the same email simultaneously"""
    attempts = 8
    barrier = Barrier(attempts)

    def register(_):
        barrier.wait()
        try:
            EntitlementService.register_participant(
                store,
                "kwame@example.com",
                "Kwame Mensah",
                "+233 24 123 4567",
                caller_is_admin=True,
            )
            return "created"
        except ConflictError:
            return "duplicate"

    with ThreadPoolExecutor(max_workers=attempts) as pool:
        outcomes = list(pool.map(register, range(attempts)))

    assert outcomes.count("created") == 1
    assert outcomes.count("duplicate") == attempts - 1
    assert store.count() == 1


@pytest.mark.parametrize("round_", range(5))
def test_concurrent_mark_and_reset_same_cell(store: InMemoryParticipantRepository, round_):
    """The final state is one of the two requested states, never a mix"""
    store.insert(make_participant("tomas", email="tomas@example.com"))
    barrier = Barrier(2)
    when = SCAN_TIMES[("day2", "lunch")]

    def mark():
        barrier.wait()
        EntitlementService.mark_consumed(store, "tomas@example.com", "day2", "lunch", when)

    def reset():
        barrier.wait()
        EntitlementService.reset_meal(
            store, "tomas@example.com", "day2", "lunch", caller_is_admin=True
        )

    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [pool.submit(mark), pool.submit(reset)]
        for future in futures:
            future.result()

    cell = store.get("tomas@example.com").meal("day2", "lunch")
    assert cell in (MealState.consumed_on(when), MealState.not_consumed())
