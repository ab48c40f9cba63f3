"""Tests for the journal repository."""

from collections.abc import Callable
from pathlib import Path

import pytest

from worklog.errors import JournalError
from worklog.repository.journal import JOURNAL_REPO
from worklog.template.entry import get_entry_template



def test_save_flush_and_reload(
    workspace: Path, reload_repositories: Callable[[], None]
) -> None:
    """Saved entries are written per day and read back after a reset."""
    entry = get_entry_template("2024-03-01")
    entry["description"] = "Wrote the export"
    entry["ticket_refs"] = [{"key": "OLD-1", "summary": "Legacy"}]

    assert JOURNAL_REPO.save_entry("2024-03-01", entry) == 0
    assert JOURNAL_REPO.flush()
    assert (workspace / "journal" / "2024-03-01.yaml").is_file()

    reload_repositories()
    entries = JOURNAL_REPO.load_entries_for_date("2024-03-01")
    assert entries == [entry]


def test_flush_without_changes(workspace: Path) -> None:
    """Nothing is written when nothing changed."""
    assert not JOURNAL_REPO.flush()


def test_missing_day_is_empty(workspace: Path) -> None:
    """A day without a file has no entries."""
    assert JOURNAL_REPO.load_entries_for_date("2024-03-01") == []
    assert JOURNAL_REPO.get_entry("2024-03-01", 0) is None


def test_update_and_delete(workspace: Path) -> None:
    """Entries are addressed by their index within the day."""
    first = get_entry_template("2024-03-01")
    second = get_entry_template("2024-03-01")
    second["description"] = "second"
    JOURNAL_REPO.save_entry("2024-03-01", first)
    JOURNAL_REPO.save_entry("2024-03-01", second)

    second["project"] = "Core"
    assert JOURNAL_REPO.update_entry("2024-03-01", 1, second)
    assert not JOURNAL_REPO.update_entry("2024-03-01", 5, second)
    stored = JOURNAL_REPO.get_entry("2024-03-01", 1)
    assert stored is not None
    assert stored["project"] == "Core"

    assert JOURNAL_REPO.delete_entry("2024-03-01", 0)
    assert not JOURNAL_REPO.delete_entry("2024-03-01", 3)
    assert [e["description"] for e in JOURNAL_REPO.load_entries_for_date("2024-03-01")] == [
        "second"
    ]


def test_emptied_day_file_is_removed(workspace: Path) -> None:
    """Deleting the last entry of a day removes its file on flush."""
    JOURNAL_REPO.save_entry("2024-03-01", get_entry_template("2024-03-01"))
    JOURNAL_REPO.flush()
    JOURNAL_REPO.delete_entry("2024-03-01", 0)
    JOURNAL_REPO.flush()
    assert not (workspace / "journal" / "2024-03-01.yaml").exists()
    assert JOURNAL_REPO.get_available_dates() == []


def test_returned_entries_are_copies(workspace: Path) -> None:
    """Changing a returned entry does not change the stored one."""
    JOURNAL_REPO.save_entry("2024-03-01", get_entry_template("2024-03-01"))
    entry = JOURNAL_REPO.get_entry("2024-03-01", 0)
    assert entry is not None
    entry["tags"].append("bug")
    stored = JOURNAL_REPO.get_entry("2024-03-01", 0)
    assert stored is not None
    assert stored["tags"] == []


def test_entry_date_must_match_day(workspace: Path) -> None:
    """An entry cannot be filed under another date."""
    with pytest.raises(JournalError):
        JOURNAL_REPO.save_entry("2024-03-02", get_entry_template("2024-03-01"))


def test_invalid_date(workspace: Path) -> None:
    """Dates must be real calendar days."""
    with pytest.raises(JournalError):
        JOURNAL_REPO.load_entries_for_date("2024-02-30")
    with pytest.raises(JournalError):
        JOURNAL_REPO.load_entries_for_date("yesterday")


def test_corrupt_day_file(workspace: Path) -> None:
    """A day file that is not a mapping raises a journal error."""
    (workspace / "journal" / "2024-03-01.yaml").write_text("- just\n- a list\n")
    with pytest.raises(JournalError):
        JOURNAL_REPO.load_entries_for_date("2024-03-01")


def test_available_dates_and_range(
    workspace: Path, reload_repositories: Callable[[], None]
) -> None:
    """Dates are listed newest first and filtered inclusively."""
    for date in ("2024-03-01", "2024-03-15", "2024-04-01"):
        JOURNAL_REPO.save_entry(date, get_entry_template(date))
    JOURNAL_REPO.flush()
    reload_repositories()

    assert JOURNAL_REPO.get_available_dates() == [
        "2024-04-01",
        "2024-03-15",
        "2024-03-01",
    ]
    assert sorted(JOURNAL_REPO.get_entries_between("2024-03-01", "2024-03-31")) == [
        "2024-03-01",
        "2024-03-15",
    ]


def test_entry_that_is_not_a_mapping(workspace: Path) -> None:
    """A day file listing a bare value as an entry raises a journal error."""
    (workspace / "journal" / "2024-03-01.yaml").write_text(
        "date: 2024-03-01\nentries:\n- oops\n"
    )
    with pytest.raises(JournalError):
        JOURNAL_REPO.load_entries_for_date("2024-03-01")


def test_hand_written_day_is_normalized(workspace: Path) -> None:
    """Loaded entries get masked time ranges, text fields and unique tags."""
    (workspace / "journal" / "2024-03-01.yaml").write_text(
        "date: 2024-03-01\n"
        "entries:\n"
        "- description: unquoted start\n"
        "  time_range: 14:30\n"
        "  duration: 2\n"
        "  tags: [bug, api, bug]\n"
        "- description: compact range\n"
        "  time_range: 1430-1630\n"
    )
    entries = JOURNAL_REPO.load_entries_for_date("2024-03-01")

    assert entries[0]["time_range"] == "14:30"
    assert entries[0]["duration"] == "2"
    assert entries[0]["tags"] == ["bug", "api"]
    assert entries[0]["date"] == "2024-03-01"
    assert entries[1]["time_range"] == "14:30-16:30"
