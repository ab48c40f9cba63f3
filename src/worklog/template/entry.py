# SPDX-License-Identifier: MIT

from typing import Optional

from worklog.configuration import DEFAULT_ENTRY_TYPES
from worklog.model.entry import Entry
from worklog.time import today_str


def get_entry_template(
    date: Optional[str] = None, entry_type: Optional[str] = None
) -> Entry:
    return {
        "date": date if date is not None else today_str(),
        "time_range": "",
        "project": "",
        "entry_type": entry_type if entry_type is not None else DEFAULT_ENTRY_TYPES[0],
        "description": "",
        "duration": "",
        "results": "",
        "blockers": "",
        "reflections": "",
        "tags": [],
        "links": [],
        "ticket_refs": [],
    }
