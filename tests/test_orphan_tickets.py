"""Tests for selected tickets missing from the candidate pool."""

import random

from worklog.model.entry import TicketRef
from worklog.model.ticket import PoolTicket
from worklog.service.ticket import ORPHAN_STATUS, reconcile, toggle

POOL: list[PoolTicket] = [
    {"key": "ABC-1", "summary": "Login page", "status": "In Progress"},
]


def test_orphan_follows_pool_tickets() -> None:
    """A reference absent from the pool is appended after the pool."""
    view = reconcile([{"key": "OLD-5", "summary": "Migrate database"}], POOL)
    assert [candidate["key"] for candidate in view] == ["ABC-1", "OLD-5"]
    assert view[1] == {
        "key": "OLD-5",
        "summary": "Migrate database",
        "status": ORPHAN_STATUS,
        "is_selected": True,
        "is_available": False,
    }


def test_orphans_keep_reference_order() -> None:
    """Orphans appear in the order the entry references them."""
    refs: list[TicketRef] = [{"key": "Z-1"}, {"key": "ABC-1"}, {"key": "A-1"}]
    view = reconcile(refs, POOL)
    assert [candidate["key"] for candidate in view] == ["ABC-1", "Z-1", "A-1"]


def test_orphans_survive_an_empty_pool() -> None:
    """An empty or failed search never loses a selection."""
    refs: list[TicketRef] = [{"key": "OLD-1", "summary": "One"}, {"key": "OLD-2"}]
    view = reconcile(refs, [])
    assert [candidate["key"] for candidate in view] == ["OLD-1", "OLD-2"]
    assert all(candidate["is_selected"] for candidate in view)
    assert not any(candidate["is_available"] for candidate in view)


def test_toggling_another_ticket_keeps_orphans() -> None:
    """Selecting a pool ticket leaves the orphan reference in place."""
    refs: list[TicketRef] = [{"key": "OLD-5", "summary": "Migrate database"}]
    new_refs, view = toggle("ABC-1", refs, POOL)
    assert new_refs == [
        {"key": "OLD-5", "summary": "Migrate database"},
        {"key": "ABC-1", "summary": "Login page"},
    ]
    assert [candidate["key"] for candidate in view] == ["ABC-1", "OLD-5"]


def test_orphan_can_be_deselected() -> None:
    """Deselecting an orphan removes it from the view."""
    refs: list[TicketRef] = [{"key": "OLD-5", "summary": "Migrate database"}]
    new_refs, view = toggle("OLD-5", refs, POOL)
    assert new_refs == []
    assert [candidate["key"] for candidate in view] == ["ABC-1"]


def test_every_reference_is_in_the_view() -> None:
    """Random pools and selections always show each referenced key once."""
    generator = random.Random(42)
    keys = [f"K-{number}" for number in range(12)]
    for _ in range(300):
        pool: list[PoolTicket] = [
            {"key": key, "summary": key.lower(), "status": "Open"}
            for key in generator.sample(keys, generator.randint(0, len(keys)))
        ]
        refs: list[TicketRef] = [
            {"key": key}
            for key in generator.sample(keys, generator.randint(0, len(keys)))
        ]
        view = reconcile(refs, pool)
        view_keys = [candidate["key"] for candidate in view]

        assert len(view_keys) == len(set(view_keys))
        for ref in refs:
            assert ref["key"] in view_keys
        pool_keys = {ticket["key"] for ticket in pool}
        for candidate in view:
            if candidate["key"] in {ref["key"] for ref in refs}:
                assert candidate["is_selected"]
            assert candidate["is_available"] == (candidate["key"] in pool_keys)
