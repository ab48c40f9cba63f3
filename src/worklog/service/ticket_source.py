# SPDX-License-Identifier: MIT

import json
from pathlib import Path
from typing import Any, Optional, Protocol

import structlog

from worklog.errors import TicketSourceError
from worklog.model.ticket import RawTicket
from worklog.service.ticket import CandidatePoolTracker, candidates_from_raw

logger = structlog.get_logger()


class TicketSource(Protocol):
    def fetch(
        self, query: Optional[str], selected_keys: list[str]
    ) -> list[RawTicket]: ...


class MockTicketSource:
    """Demo tickets, used when no saved search result is configured."""

    def fetch(self, query: Optional[str], selected_keys: list[str]) -> list[RawTicket]:
        logger.info("using mock tickets, no ticket source configured", query=query)
        return [
            {
                "key": "MOCK-1",
                "fields": {
                    "summary": "Demo ticket 1",
                    "status": {"name": "In Progress"},
                    "issuetype": {"name": "Task"},
                },
            },
            {
                "key": "MOCK-2",
                "fields": {
                    "summary": "Demo ticket 2",
                    "status": {"name": "To Do"},
                    "issuetype": {"name": "Bug"},
                },
            },
        ]


class FileTicketSource:
    """
    Reads issues from a saved issue tracker search response.

    The file holds either the search response object (``{"issues": [...]}``)
    or a bare list of issues.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def fetch(self, query: Optional[str], selected_keys: list[str]) -> list[RawTicket]:
        try:
            data: Any = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise TicketSourceError(f"Cannot read ticket source {self.path}: {e}")
        except UnicodeDecodeError as e:
            raise TicketSourceError(f"Ticket source {self.path} is not UTF-8 text: {e}")
        except json.JSONDecodeError as e:
            raise TicketSourceError(f"Ticket source {self.path} is not JSON: {e}")

        issues = data.get("issues") if isinstance(data, dict) else data
        if not isinstance(issues, list):
            raise TicketSourceError(
                f"Ticket source {self.path} has no list of issues"
            )

        tickets: list[RawTicket] = []
        for issue in issues:
            if not isinstance(issue, dict) or "key" not in issue:
                logger.warning("skipping malformed issue", issue=issue)
                continue
            tickets.append(issue)  # type: ignore[arg-type]

        logger.debug(
            "tickets read from file",
            path=str(self.path),
            query=query,
            tickets=len(tickets),
            selected=selected_keys,
        )
        return tickets


def get_ticket_source(path: Optional[str]) -> TicketSource:
    if path is None:
        return MockTicketSource()
    return FileTicketSource(Path(path).expanduser())


def fetch_candidate_pool(
    source: TicketSource,
    tracker: CandidatePoolTracker,
    query: Optional[str],
    selected_keys: list[str],
) -> bool:
    """
    Run one pool request through ``tracker``.

    Returns whether the result became the current pool. A failing source leaves
    the previous pool in place, clears the busy state and re-raises.
    """
    request_id = tracker.begin_request(query)
    try:
        pool = candidates_from_raw(source.fetch(query, selected_keys))
    except Exception as e:
        tracker.fail(request_id, e)
        raise
    return tracker.resolve(request_id, pool)
