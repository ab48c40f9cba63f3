# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from worklog.errors import JournalError, TicketSourceError
from worklog.repository.configuration import CONFIGURATION_REPO
from worklog.repository.journal import JOURNAL_REPO
from worklog.repository.ticket import TICKET_REPO
from worklog.service.ticket import CandidatePoolTracker
from worklog.service.ticket_source import fetch_candidate_pool, get_ticket_source
from worklog.terminal.custom_typer import AliasedTyperGroup
from worklog.view.views.ticket import ticket_pool_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _selected_keys_for_recent_days(days: int = 31) -> list[str]:
    """Ticket keys referenced by the most recent journal days."""
    keys: list[str] = []
    for date in JOURNAL_REPO.get_available_dates()[:days]:
        for entry in JOURNAL_REPO.load_entries_for_date(date):
            for ref in entry["ticket_refs"]:
                if ref["key"] not in keys:
                    keys.append(ref["key"])
    return keys


@app.command("fetch, f")
def fetch(
    query: Annotated[
        Optional[str],
        typer.Option("--query", "-q", help="search query, saved as the new default"),
    ] = None,
    source: Annotated[
        Optional[str],
        typer.Option(
            "--source",
            "-s",
            help="saved search result (JSON), defaults to the configured source",
        ),
    ] = None,
) -> None:
    """Refresh the candidate ticket pool from the ticket source."""
    config = CONFIGURATION_REPO.get_config()
    console = Console()

    if query is not None:
        CONFIGURATION_REPO.update_config(jql_query=query)
    search_query = query if query is not None else config["jql_query"]
    ticket_source = get_ticket_source(
        source if source is not None else config["ticket_source_path"]
    )

    tracker = CandidatePoolTracker(TICKET_REPO.get_tickets(), TICKET_REPO.get_query())
    try:
        resolved = fetch_candidate_pool(
            ticket_source, tracker, search_query, _selected_keys_for_recent_days()
        )
    except (JournalError, TicketSourceError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if resolved:
        TICKET_REPO.set_pool(tracker.query, tracker.pool)

    ticket_pool_view(
        TICKET_REPO.get_tickets(), TICKET_REPO.get_query(), TICKET_REPO.get_fetched()
    )


@app.command("pool, p")
def pool() -> None:
    """Show the most recently fetched candidate pool."""
    ticket_pool_view(
        TICKET_REPO.get_tickets(), TICKET_REPO.get_query(), TICKET_REPO.get_fetched()
    )


@app.command("query, q")
def query(
    new_query: Annotated[Optional[str], typer.Argument(help="new saved query")] = None,
    clear: Annotated[bool, typer.Option("--clear", help="forget the saved query")] = False,
) -> None:
    """Show or change the saved search query."""
    console = Console()
    if clear:
        CONFIGURATION_REPO.update_config(remove_jql_query=True)
    elif new_query is not None:
        CONFIGURATION_REPO.update_config(jql_query=new_query)

    saved_query = CONFIGURATION_REPO.get_config()["jql_query"]
    console.print(saved_query if saved_query else "No saved query")
