"""Tests for ticket reconciliation and selection toggling."""

from worklog.model.entry import TicketRef
from worklog.model.ticket import PoolTicket
from worklog.service.ticket import (
    ORPHAN_SUMMARY,
    candidates_from_raw,
    display_summary,
    reconcile,
    toggle,
)

POOL: list[PoolTicket] = [
    {"key": "ABC-1", "summary": "Login page", "status": "In Progress"},
    {"key": "ABC-2", "summary": "Export CSV", "status": "To Do"},
]


def test_candidates_from_raw_flattens_fields() -> None:
    """Search results become key, summary and status."""
    pool = candidates_from_raw(
        [
            {
                "key": "ABC-1",
                "fields": {
                    "summary": "Login page",
                    "status": {"name": "In Progress"},
                    "issuetype": {"name": "Task"},
                },
            },
            {"key": "ABC-9", "fields": {}},  # type: ignore[typeddict-item]
        ]
    )
    assert pool == [
        {"key": "ABC-1", "summary": "Login page", "status": "In Progress"},
        {"key": "ABC-9", "summary": "", "status": ""},
    ]


def test_reconcile_empty_selection() -> None:
    """Without references the view is the pool, nothing selected."""
    view = reconcile([], POOL)
    assert [candidate["key"] for candidate in view] == ["ABC-1", "ABC-2"]
    assert all(candidate["is_available"] for candidate in view)
    assert not any(candidate["is_selected"] for candidate in view)


def test_reconcile_marks_selected_pool_tickets() -> None:
    """A referenced pool ticket is selected and keeps its pool data."""
    view = reconcile([{"key": "ABC-2", "summary": "old summary"}], POOL)
    assert view[1] == {
        "key": "ABC-2",
        "summary": "Export CSV",
        "status": "To Do",
        "is_selected": True,
        "is_available": True,
    }
    assert len(view) == 2


def test_reconcile_deduplicates_pool_keys() -> None:
    """A key offered twice by the pool is shown once, first occurrence wins."""
    pool: list[PoolTicket] = POOL + [
        {"key": "ABC-1", "summary": "Duplicate", "status": "Done"}
    ]
    view = reconcile([], pool)
    assert [candidate["key"] for candidate in view] == ["ABC-1", "ABC-2"]
    assert view[0]["summary"] == "Login page"


def test_reconcile_ignores_duplicate_references() -> None:
    """A key referenced twice produces a single candidate."""
    refs: list[TicketRef] = [{"key": "XYZ-1"}, {"key": "XYZ-1", "summary": "again"}]
    view = reconcile(refs, [])
    assert len(view) == 1


def test_toggle_selects_pool_ticket() -> None:
    """Selecting a pool ticket stores its key and summary."""
    refs, view = toggle("ABC-1", [], POOL)
    assert refs == [{"key": "ABC-1", "summary": "Login page"}]
    assert view[0]["is_selected"]


def test_toggle_deselects_and_keeps_order() -> None:
    """Deselecting removes only that key."""
    refs: list[TicketRef] = [
        {"key": "ABC-1", "summary": "Login page"},
        {"key": "OLD-7", "summary": "Legacy"},
        {"key": "ABC-2", "summary": "Export CSV"},
    ]
    new_refs, view = toggle("OLD-7", refs, POOL)
    assert [ref["key"] for ref in new_refs] == ["ABC-1", "ABC-2"]
    assert "OLD-7" not in [candidate["key"] for candidate in view]


def test_toggle_twice_restores_references() -> None:
    """Selecting then deselecting a pool ticket is a no-op overall."""
    refs: list[TicketRef] = [{"key": "ABC-2", "summary": "Export CSV"}]
    selected, _ = toggle("ABC-1", refs, POOL)
    restored, _ = toggle("ABC-1", selected, POOL)
    assert restored == refs


def test_toggle_unknown_key_changes_nothing() -> None:
    """A key neither referenced nor offered is ignored."""
    refs: list[TicketRef] = [{"key": "ABC-1", "summary": "Login page"}]
    new_refs, view = toggle("NOPE-1", refs, POOL)
    assert new_refs == refs
    assert "NOPE-1" not in [candidate["key"] for candidate in view]


def test_toggle_does_not_mutate_arguments() -> None:
    """The caller's references and pool are left untouched."""
    refs: list[TicketRef] = [{"key": "ABC-1", "summary": "Login page"}]
    pool = [dict(ticket) for ticket in POOL]
    toggle("ABC-2", refs, pool)  # type: ignore[arg-type]
    toggle("ABC-1", refs, pool)  # type: ignore[arg-type]
    assert refs == [{"key": "ABC-1", "summary": "Login page"}]
    assert pool == POOL


def test_display_summary() -> None:
    """Orphans without a stored summary get the fallback text."""
    view = reconcile([{"key": "OLD-1"}, {"key": "OLD-2", "summary": "Kept"}], POOL)
    by_key = {candidate["key"]: candidate for candidate in view}
    assert display_summary(by_key["OLD-1"]) == ORPHAN_SUMMARY
    assert display_summary(by_key["OLD-2"]) == "Kept"
    assert display_summary(by_key["ABC-1"]) == "Login page"


def test_candidates_from_raw_accepts_loose_fields() -> None:
    """Bare status names and non-text summaries are read as text."""
    pool = candidates_from_raw(
        [
            {"key": "A-1", "fields": {"summary": "x", "status": "Open"}},  # type: ignore[typeddict-item]
            {"key": "A-2", "fields": {"summary": 42, "status": None}},  # type: ignore[typeddict-item]
            {"key": "A-3", "fields": "broken"},  # type: ignore[typeddict-item]
        ]
    )
    assert pool == [
        {"key": "A-1", "summary": "x", "status": "Open"},
        {"key": "A-2", "summary": "42", "status": ""},
        {"key": "A-3", "summary": "", "status": ""},
    ]
