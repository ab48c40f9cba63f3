# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, Optional, TypedDict

LinkField = Literal["text", "url"]

ScalarField = Literal[
    "time_range",
    "project",
    "entry_type",
    "description",
    "duration",
    "results",
    "blockers",
    "reflections",
]

SCALAR_FIELDS: tuple[ScalarField, ...] = (
    "time_range",
    "project",
    "entry_type",
    "description",
    "duration",
    "results",
    "blockers",
    "reflections",
)


class Link(TypedDict):
    text: str
    url: str


class TicketRef(TypedDict):
    key: str
    summary: NotRequired[Optional[str]]


class Entry(TypedDict):
    date: str  # YYYY-MM-DD, grouping key
    time_range: Optional[str]  # prefix of HH:MM-HH:MM
    project: str
    entry_type: str
    description: str
    duration: str  # display only, e.g. "3h"
    results: str
    blockers: str
    reflections: str
    tags: list[str]
    links: list[Link]
    ticket_refs: list[TicketRef]
