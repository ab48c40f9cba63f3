# SPDX-License-Identifier: MIT

from typing import Optional

import structlog

from worklog.model.entry import TicketRef
from worklog.model.ticket import PoolTicket, RawTicket, TicketCandidate

logger = structlog.get_logger()

ORPHAN_SUMMARY = "Ticket not found in the current search"
ORPHAN_STATUS = ""


def candidates_from_raw(raw_tickets: list[RawTicket]) -> list[PoolTicket]:
    """Flatten issue tracker search results into pool tickets."""
    pool: list[PoolTicket] = []
    for raw_ticket in raw_tickets:
        fields = raw_ticket.get("fields")
        if not isinstance(fields, dict):
            fields = {}
        status = fields.get("status")
        # Some trackers export the status as a bare name
        if isinstance(status, dict):
            status_name = status.get("name")
        else:
            status_name = status
        summary = fields.get("summary")
        pool.append(
            {
                "key": str(raw_ticket["key"]),
                "summary": str(summary) if summary is not None else "",
                "status": str(status_name) if status_name is not None else "",
            }
        )
    return pool


def reconcile(
    selected_refs: list[TicketRef], candidate_pool: list[PoolTicket]
) -> list[TicketCandidate]:
    """
    Merge an entry's selected ticket references with the candidate pool.

    Pool tickets come first, in pool order, flagged available and selected
    when their key is referenced by the entry. Referenced keys that the pool
    does not contain follow in reference order as orphans: selected, not
    available, shown with the stored summary. A referenced ticket is never
    dropped and no key appears twice.
    """
    selected_keys = {ref["key"] for ref in selected_refs}

    reconciled: list[TicketCandidate] = []
    seen_keys: set[str] = set()

    for ticket in candidate_pool:
        if ticket["key"] in seen_keys:
            continue
        seen_keys.add(ticket["key"])
        reconciled.append(
            {
                "key": ticket["key"],
                "summary": ticket["summary"],
                "status": ticket["status"],
                "is_selected": ticket["key"] in selected_keys,
                "is_available": True,
            }
        )

    for ref in selected_refs:
        if ref["key"] in seen_keys:
            continue
        seen_keys.add(ref["key"])
        reconciled.append(
            {
                "key": ref["key"],
                "summary": ref.get("summary") or "",
                "status": ORPHAN_STATUS,
                "is_selected": True,
                "is_available": False,
            }
        )

    return reconciled


def toggle(
    key: str, selected_refs: list[TicketRef], candidate_pool: list[PoolTicket]
) -> tuple[list[TicketRef], list[TicketCandidate]]:
    """
    Select or deselect ``key`` and return the new refs with their reconciled view.

    Deselecting removes the reference by key and keeps the order of the rest.
    Selecting looks the key up in the reconciled view, not the raw pool, so the
    stored summary is always known, even for an orphan being re-added. A key
    that is neither referenced nor offered leaves the refs untouched.
    """
    if any(ref["key"] == key for ref in selected_refs):
        new_refs = [
            TicketRef(**ref) for ref in selected_refs if ref["key"] != key
        ]
        return new_refs, reconcile(new_refs, candidate_pool)

    current_view = reconcile(selected_refs, candidate_pool)
    candidate = next(
        (candidate for candidate in current_view if candidate["key"] == key), None
    )
    if candidate is None:
        logger.warning(
            "ticket toggle ignored, key is neither selected nor offered",
            key=key,
            selected=[ref["key"] for ref in selected_refs],
        )
        return [TicketRef(**ref) for ref in selected_refs], current_view

    new_refs = [TicketRef(**ref) for ref in selected_refs]
    new_refs.append({"key": candidate["key"], "summary": candidate["summary"]})
    return new_refs, reconcile(new_refs, candidate_pool)


def display_summary(candidate: TicketCandidate) -> str:
    """Summary to show for a candidate, with a fallback for bare orphans."""
    if candidate["summary"]:
        return candidate["summary"]
    if not candidate["is_available"]:
        return ORPHAN_SUMMARY
    return ""


class CandidatePoolTracker:
    """
    Holds the most recently resolved candidate pool.

    Every fetch takes a request id from ``begin_request``. Only the most recent
    outstanding request may resolve the pool; results for older requests are
    discarded so a slow response can never replace a newer one.
    """

    def __init__(
        self,
        pool: Optional[list[PoolTicket]] = None,
        query: Optional[str] = None,
    ) -> None:
        self._pool: list[PoolTicket] = list(pool) if pool is not None else []
        self._query = query
        self._last_request_id = 0
        self._outstanding_request_id: Optional[int] = None
        self._pending_query: Optional[str] = None

    @property
    def pool(self) -> list[PoolTicket]:
        return list(self._pool)

    @property
    def query(self) -> Optional[str]:
        return self._query

    @property
    def is_busy(self) -> bool:
        return self._outstanding_request_id is not None

    def begin_request(self, query: Optional[str]) -> int:
        self._last_request_id += 1
        self._outstanding_request_id = self._last_request_id
        self._pending_query = query
        logger.debug("candidate pool request started", request_id=self._last_request_id)
        return self._last_request_id

    def resolve(self, request_id: int, pool: list[PoolTicket]) -> bool:
        if request_id != self._outstanding_request_id:
            logger.info(
                "stale candidate pool discarded",
                request_id=request_id,
                latest_request_id=self._last_request_id,
            )
            return False
        self._pool = list(pool)
        self._query = self._pending_query
        self._outstanding_request_id = None
        self._pending_query = None
        logger.debug(
            "candidate pool resolved", request_id=request_id, tickets=len(pool)
        )
        return True

    def fail(self, request_id: int, error: Exception) -> bool:
        """Clear the busy state for a failed request, keeping the previous pool."""
        if request_id != self._outstanding_request_id:
            return False
        self._outstanding_request_id = None
        self._pending_query = None
        logger.warning(
            "candidate pool request failed", request_id=request_id, error=str(error)
        )
        return True

    def reconcile(self, selected_refs: list[TicketRef]) -> list[TicketCandidate]:
        return reconcile(selected_refs, self._pool)

    def toggle(
        self, key: str, selected_refs: list[TicketRef]
    ) -> tuple[list[TicketRef], list[TicketCandidate]]:
        return toggle(key, selected_refs, self._pool)
