# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from worklog.errors import EntryFieldError
from worklog.model.entry import SCALAR_FIELDS, Entry, LinkField
from worklog.model.ticket import PoolTicket, TicketCandidate
from worklog.service import ticket as ticket_service
from worklog.service.time_range import mask_time_range
from worklog.template.entry import get_entry_template

LINK_FIELDS: tuple[LinkField, ...] = ("text", "url")


def merge_entry_defaults(
    partial: dict[str, Any],
    date: Optional[str] = None,
    entry_type: Optional[str] = None,
) -> Entry:
    """
    Build a working entry from partial initial data.

    Missing fields come from the entry template. ``date`` and ``entry_type``
    only apply when the partial data has no value of its own.
    """
    entry = get_entry_template(date, entry_type)
    for key, value in deepcopy(partial).items():
        if key in entry and value is not None:
            entry[key] = value  # type: ignore[literal-required]
    entry["time_range"] = mask_time_range(entry["time_range"])
    entry["tags"] = _dedupe_tags(entry["tags"])
    return entry


def set_field(entry: Entry, name: str, value: Optional[str]) -> Entry:
    """Replace one scalar field. The time range is stored masked."""
    if name not in SCALAR_FIELDS:
        raise EntryFieldError(f"'{name}' is not a settable entry field")
    if value is not None and not isinstance(value, str):
        raise EntryFieldError(
            f"'{name}' expects a string, got {type(value).__name__}"
        )

    updated = deepcopy(entry)
    if name == "time_range":
        updated["time_range"] = mask_time_range(value)
    else:
        updated[name] = value if value is not None else ""  # type: ignore[literal-required]
    return updated


def _dedupe_tags(tags: list[str]) -> list[str]:
    return list(dict.fromkeys(tag for tag in tags if tag))


def parse_tag_text(raw_text: Optional[str]) -> list[str]:
    if raw_text is None:
        return []
    return _dedupe_tags(raw_text.split())


def set_tags(entry: Entry, raw_text: Optional[str]) -> Entry:
    """Replace the tags with the whitespace separated tokens of ``raw_text``."""
    updated = deepcopy(entry)
    updated["tags"] = parse_tag_text(raw_text)
    return updated


def set_custom_tags(
    entry: Entry, raw_text: Optional[str], catalog_tags: list[str]
) -> Entry:
    """
    Replace the free-form tags while keeping the ones from the tag catalog.

    Catalog tags already on the entry stay first, in their order, followed by
    the custom tokens.
    """
    updated = deepcopy(entry)
    catalog_names = set(catalog_tags)
    kept = [tag for tag in entry["tags"] if tag in catalog_names]
    updated["tags"] = _dedupe_tags(kept + parse_tag_text(raw_text))
    return updated


def toggle_tag(entry: Entry, name: str, present: bool) -> Entry:
    updated = deepcopy(entry)
    if present:
        if name and name not in updated["tags"]:
            updated["tags"].append(name)
    else:
        updated["tags"] = [tag for tag in updated["tags"] if tag != name]
    return updated


def add_link(entry: Entry) -> Entry:
    updated = deepcopy(entry)
    updated["links"].append({"text": "", "url": ""})
    return updated


def set_link(entry: Entry, index: int, field: str, value: str) -> Entry:
    """Update one field of one link. Out of range indexes change nothing."""
    if field not in LINK_FIELDS:
        raise EntryFieldError(f"'{field}' is not a link field")

    updated = deepcopy(entry)
    if 0 <= index < len(updated["links"]):
        updated["links"][index][field] = value  # type: ignore[literal-required]
    return updated


def toggle_ticket(
    entry: Entry, key: str, candidate_pool: list[PoolTicket]
) -> tuple[Entry, list[TicketCandidate]]:
    """Select or deselect a ticket on the entry, see ``ticket.toggle``."""
    new_refs, view = ticket_service.toggle(key, entry["ticket_refs"], candidate_pool)
    updated = deepcopy(entry)
    updated["ticket_refs"] = new_refs
    return updated, view
