# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from worklog.model.ticket import PoolTicket, TicketCandidate
from worklog.service.ticket import display_summary
from worklog.time import (
    datetime_from_str,
    datetime_to_display_local_datetime_str_optional,
)
from worklog.view.views.header import header


def ticket_candidates_view(candidates: list[TicketCandidate]) -> None:
    """Show the reconciled tickets of an entry, orphans dimmed."""
    header("tickets")

    tickets_table = Table(box=box.SIMPLE)
    tickets_table.add_column("selected")
    tickets_table.add_column("key")
    tickets_table.add_column("summary")
    tickets_table.add_column("status")

    for candidate in candidates:
        summary = display_summary(candidate)
        if not candidate["is_available"]:
            summary = f"[dim]{summary} (not in the current search)[/dim]"
        tickets_table.add_row(
            "X" if candidate["is_selected"] else "",
            candidate["key"],
            summary,
            candidate["status"],
        )

    console = Console()
    console.print(tickets_table)


def ticket_pool_view(
    tickets: list[PoolTicket], query: Optional[str], fetched: Optional[str]
) -> None:
    header("ticket pool")

    console = Console()
    console.print(f" query: {query or '(none)'}")
    fetched_display = datetime_to_display_local_datetime_str_optional(
        datetime_from_str(fetched) if fetched is not None else None
    )
    console.print(f" fetched: {fetched_display or '(never)'}")

    pool_table = Table(box=box.SIMPLE)
    pool_table.add_column("key")
    pool_table.add_column("summary")
    pool_table.add_column("status")

    for ticket in tickets:
        pool_table.add_row(ticket["key"], ticket["summary"], ticket["status"])

    console.print(pool_table)
