# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

import structlog
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from worklog import configuration
from worklog.errors import JournalError
from worklog.model.entry import SCALAR_FIELDS, Entry
from worklog.service.entry import merge_entry_defaults
from worklog.time import is_date_str

logger = structlog.get_logger()


class JournalRepository:
    """
    Journal entries grouped by date, one YAML file per day.

    Days are loaded on first access and written back by ``flush``. Entries are
    addressed by their position within the day.
    """

    def __init__(self) -> None:
        self._days: dict[str, list[Entry]] = {}
        self.is_dirty = False
        self._dirty_dates: set[str] = set()

    def __day_path(self, date: str) -> Path:
        return configuration.DATA_JOURNAL_DIR / f"{date}.yaml"

    def __check_date(self, date: str) -> None:
        if not is_date_str(date):
            raise JournalError(f"Invalid journal date '{date}', expected YYYY-MM-DD")

    def __entries_for(self, date: str) -> list[Entry]:
        self.__check_date(date)
        if date not in self._days:
            self._days[date] = self.__load_day(date)
        return self._days[date]

    def __load_day(self, date: str) -> list[Entry]:
        file_path = self.__day_path(date)
        if not file_path.is_file():
            return []
        try:
            raw_day = load(file_path.read_text(), Loader=Loader)
        except (OSError, UnicodeDecodeError, YAMLError) as e:
            raise JournalError(f"Cannot read journal for {date}: {e}")
        if raw_day is None:
            return []
        if not isinstance(raw_day, dict):
            raise JournalError(f"Journal for {date} is not a mapping")
        raw_entries = raw_day.get("entries") or []
        if not isinstance(raw_entries, list):
            raise JournalError(f"Journal entries for {date} are not a list")
        return [
            self.__convert_entry_for_deserialization(date, raw_entry)
            for raw_entry in raw_entries
        ]

    def __save_data(self) -> None:
        for date in sorted(self._dirty_dates):
            file_path = self.__day_path(date)
            entries = self._days.get(date, [])
            try:
                if len(entries) == 0:
                    if file_path.exists():
                        file_path.unlink()
                    continue
                serializable_day = {
                    "date": date,
                    "entries": [
                        self.__convert_entry_for_serialization(entry)
                        for entry in entries
                    ],
                }
                file_path.write_text(
                    dump(serializable_day, Dumper=Dumper, allow_unicode=True)
                )
            except OSError as e:
                raise JournalError(f"Cannot write journal for {date}: {e}")
            logger.debug("journal day written", date=date, entries=len(entries))

        self._dirty_dates.clear()

    def flush(self) -> bool:
        if self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop cached days so the next access reads from disk."""
        self._days = {}
        self._dirty_dates.clear()
        self.is_dirty = False

    def __convert_entry_for_serialization(self, entry: Entry) -> dict[str, Any]:
        serializable_entry = cast(dict[str, Any], deepcopy(entry))
        # The file is keyed by date already
        serializable_entry.pop("date", None)
        return serializable_entry

    def __convert_entry_for_deserialization(self, date: str, raw_entry: Any) -> Entry:
        if not isinstance(raw_entry, dict):
            raise JournalError(
                f"Journal for {date} holds an entry that is not a mapping"
            )

        partial = {key: value for key, value in raw_entry.items() if key != "date"}
        time_range = partial.get("time_range")
        if isinstance(time_range, int) and not isinstance(time_range, bool):
            # Unquoted "14:30" reads as the YAML 1.1 base 60 integer 870
            partial["time_range"] = f"{time_range // 60:02d}:{time_range % 60:02d}"
        for field in SCALAR_FIELDS:
            value = partial.get(field)
            if value is not None and not isinstance(value, str):
                partial[field] = str(value)
        if isinstance(partial.get("tags"), list):
            partial["tags"] = [str(tag) for tag in partial["tags"] if tag is not None]
        else:
            partial.pop("tags", None)

        return merge_entry_defaults(partial, date)

    def __mark_dirty(self, date: str) -> None:
        self.is_dirty = True
        self._dirty_dates.add(date)

    def __check_entry_date(self, date: str, entry: Entry) -> None:
        if entry["date"] != date:
            raise JournalError(
                f"Entry dated {entry['date']} cannot be stored under {date}"
            )

    def load_entries_for_date(self, date: str) -> list[Entry]:
        return deepcopy(self.__entries_for(date))

    def get_entry(self, date: str, index: int) -> Optional[Entry]:
        entries = self.__entries_for(date)
        if 0 <= index < len(entries):
            return deepcopy(entries[index])
        return None

    def save_entry(self, date: str, entry: Entry) -> int:
        """Append ``entry`` to the day and return its index."""
        self.__check_entry_date(date, entry)
        entries = self.__entries_for(date)
        entries.append(deepcopy(entry))
        self.__mark_dirty(date)
        logger.info("journal entry saved", date=date, index=len(entries) - 1)
        return len(entries) - 1

    def update_entry(self, date: str, index: int, entry: Entry) -> bool:
        self.__check_entry_date(date, entry)
        entries = self.__entries_for(date)
        if not (0 <= index < len(entries)):
            logger.warning("journal entry not found", date=date, index=index)
            return False
        entries[index] = deepcopy(entry)
        self.__mark_dirty(date)
        logger.info("journal entry updated", date=date, index=index)
        return True

    def delete_entry(self, date: str, index: int) -> bool:
        entries = self.__entries_for(date)
        if not (0 <= index < len(entries)):
            logger.warning("journal entry not found", date=date, index=index)
            return False
        del entries[index]
        self.__mark_dirty(date)
        logger.info("journal entry deleted", date=date, index=index)
        return True

    def get_available_dates(self) -> list[str]:
        """Dates holding at least one entry, newest first."""
        dates: set[str] = set()
        if configuration.DATA_JOURNAL_DIR.is_dir():
            for file_path in configuration.DATA_JOURNAL_DIR.iterdir():
                if file_path.suffix == ".yaml" and is_date_str(file_path.stem):
                    dates.add(file_path.stem)
        # Unflushed changes win over what is on disk
        for date, entries in self._days.items():
            if len(entries) > 0:
                dates.add(date)
            else:
                dates.discard(date)
        return sorted(dates, reverse=True)

    def get_entries_between(self, start: str, end: str) -> dict[str, list[Entry]]:
        return {
            date: self.load_entries_for_date(date)
            for date in self.get_available_dates()
            if start <= date <= end
        }


JOURNAL_REPO = JournalRepository()
