# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class RawTicketStatus(TypedDict):
    name: str


class RawTicketIssueType(TypedDict):
    name: str


class RawTicketFields(TypedDict):
    summary: str
    status: RawTicketStatus
    issuetype: RawTicketIssueType


class RawTicket(TypedDict):
    """One issue as returned by the issue tracker search endpoint."""

    key: str
    fields: RawTicketFields


class PoolTicket(TypedDict):
    key: str
    summary: str
    status: str


class TicketCandidate(TypedDict):
    key: str
    summary: str
    status: str
    is_selected: bool
    is_available: bool


class TicketPool(TypedDict):
    query: Optional[str]
    fetched: Optional[str]
    tickets: list[PoolTicket]
