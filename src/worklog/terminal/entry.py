# SPDX-License-Identifier: MIT

from typing import Annotated, NoReturn, Optional

import structlog
import typer
from rich.console import Console

from worklog.errors import EntryFieldError, JournalError
from worklog.model.entry import Entry
from worklog.model.ticket import PoolTicket
from worklog.repository.catalog import TAG_REPO
from worklog.repository.configuration import CONFIGURATION_REPO
from worklog.repository.journal import JOURNAL_REPO
from worklog.repository.ticket import TICKET_REPO
from worklog.service import entry as entry_service
from worklog.service.ticket import reconcile
from worklog.template.entry import get_entry_template
from worklog.terminal.completion import (
    complete_entry_type,
    complete_project,
    complete_tag,
    complete_ticket,
)
from worklog.terminal.custom_typer import AliasedTyperGroup
from worklog.terminal.parse import parse_date, parse_link
from worklog.time import today_str
from worklog.view.views import entry as entry_view
from worklog.view.views import ticket as ticket_view

logger = structlog.get_logger()

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def _fail(message: str) -> NoReturn:
    console = Console()
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


def _apply_fields(
    entry: Entry,
    fields: dict[str, Optional[str]],
) -> Entry:
    for name, value in fields.items():
        if value is not None:
            entry = entry_service.set_field(entry, name, value)
    return entry


def _apply_tags(
    entry: Entry,
    tag_text: Optional[str],
    custom_tag_text: Optional[str],
    add_tags: Optional[list[str]],
    remove_tags: Optional[list[str]],
) -> Entry:
    if tag_text is not None:
        entry = entry_service.set_tags(entry, tag_text)
    if custom_tag_text is not None:
        entry = entry_service.set_custom_tags(
            entry, custom_tag_text, TAG_REPO.get_names(include_inactive=True)
        )
    for tag in add_tags or []:
        entry = entry_service.toggle_tag(entry, tag, True)
    for tag in remove_tags or []:
        entry = entry_service.toggle_tag(entry, tag, False)
    return entry


def _apply_links(entry: Entry, links: Optional[list[str]]) -> Entry:
    for link in links or []:
        text, url = parse_link(link)
        entry = entry_service.add_link(entry)
        index = len(entry["links"]) - 1
        entry = entry_service.set_link(entry, index, "text", text)
        entry = entry_service.set_link(entry, index, "url", url)
    return entry


def _apply_tickets(
    entry: Entry, tickets: Optional[list[str]], pool: list[PoolTicket]
) -> Entry:
    for key in tickets or []:
        entry, _ = entry_service.toggle_ticket(entry, key, pool)
    return entry


def _load_entry(date: str, index: int) -> Entry:
    try:
        entry = JOURNAL_REPO.get_entry(date, index)
    except JournalError as e:
        _fail(str(e))
    if entry is None:
        _fail(f"No entry {index} on {date}")
    return entry


@app.command("add, a", no_args_is_help=True)
def add(
    description: str,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    time_range: Annotated[
        Optional[str],
        typer.Option("--time-range", "-r", help="e.g. 14:00-16:30 or 14001630"),
    ] = None,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", autocompletion=complete_project),
    ] = None,
    entry_type: Annotated[
        Optional[str],
        typer.Option("--type", "-ty", autocompletion=complete_entry_type),
    ] = None,
    duration: Annotated[
        Optional[str], typer.Option("--duration", "-du", help="e.g. 3h, 2h30, 1.5h")
    ] = None,
    results: Annotated[Optional[str], typer.Option("--results", "-re")] = None,
    blockers: Annotated[Optional[str], typer.Option("--blockers", "-b")] = None,
    reflections: Annotated[Optional[str], typer.Option("--reflections", "-rf")] = None,
    tag_text: Annotated[
        Optional[str],
        typer.Option("--tags", help="space separated tags, e.g. 'backend api'"),
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--tag",
            "-t",
            help="accepts multiple tag options",
            autocompletion=complete_tag,
        ),
    ] = None,
    links: Annotated[
        Optional[list[str]],
        typer.Option("--link", "-l", help="text|url, accepts multiple link options"),
    ] = None,
    tickets: Annotated[
        Optional[list[str]],
        typer.Option(
            "--ticket",
            "-k",
            help="ticket key from the current pool, accepts multiple",
            autocompletion=complete_ticket,
        ),
    ] = None,
) -> None:
    """Record a new journal entry."""
    config = CONFIGURATION_REPO.get_config()

    entry_date = date if date is not None else today_str()
    entry = get_entry_template(entry_date, config["default_entry_type"])

    try:
        entry = _apply_fields(
            entry,
            {
                "description": description,
                "time_range": time_range,
                "project": project,
                "entry_type": entry_type,
                "duration": duration,
                "results": results,
                "blockers": blockers,
                "reflections": reflections,
            },
        )
    except EntryFieldError as e:
        _fail(str(e))
    entry = _apply_tags(entry, tag_text, None, tags, None)
    entry = _apply_links(entry, links)
    entry = _apply_tickets(entry, tickets, TICKET_REPO.get_tickets())

    try:
        index = JOURNAL_REPO.save_entry(entry_date, entry)
    except JournalError as e:
        _fail(str(e))

    new_entry = _load_entry(entry_date, index)
    entry_view.single_entry_view(new_entry, index)


@app.command("list, ls")
def list_entries(
    date: Annotated[
        Optional[str],
        typer.Argument(parser=parse_date, help=DATE_HELP),
    ] = None,
    no_wrap: Annotated[
        bool, typer.Option("--no-wrap", help="Truncate long columns")
    ] = False,
) -> None:
    """Show the entries of one day, today by default."""
    entry_date = date if date is not None else today_str()
    try:
        entries = JOURNAL_REPO.load_entries_for_date(entry_date)
    except JournalError as e:
        _fail(str(e))
    entry_view.entries_view(entry_date, entries, no_wrap=no_wrap)


@app.command("dates, ds")
def dates() -> None:
    """List the days that hold journal entries."""
    entry_view.dates_view(JOURNAL_REPO.get_available_dates())


@app.command("show, s", no_args_is_help=True)
def show(
    date: Annotated[str, typer.Argument(parser=parse_date, help=DATE_HELP)],
    index: int,
) -> None:
    """Show one entry with its reconciled tickets."""
    entry = _load_entry(date, index)
    entry_view.single_entry_view(entry, index)
    candidates = reconcile(entry["ticket_refs"], TICKET_REPO.get_tickets())
    if len(candidates) > 0:
        ticket_view.ticket_candidates_view(candidates)


@app.command("modify, m", no_args_is_help=True)
def modify(
    date: Annotated[str, typer.Argument(parser=parse_date, help=DATE_HELP)],
    index: int,
    description: Annotated[Optional[str], typer.Option("--description", "-de")] = None,
    time_range: Annotated[
        Optional[str],
        typer.Option("--time-range", "-r", help="e.g. 14:00-16:30 or 14001630"),
    ] = None,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", autocompletion=complete_project),
    ] = None,
    entry_type: Annotated[
        Optional[str],
        typer.Option("--type", "-ty", autocompletion=complete_entry_type),
    ] = None,
    duration: Annotated[Optional[str], typer.Option("--duration", "-du")] = None,
    results: Annotated[Optional[str], typer.Option("--results", "-re")] = None,
    blockers: Annotated[Optional[str], typer.Option("--blockers", "-b")] = None,
    reflections: Annotated[Optional[str], typer.Option("--reflections", "-rf")] = None,
    tag_text: Annotated[
        Optional[str],
        typer.Option("--tags", help="replace all tags with these space separated tags"),
    ] = None,
    custom_tag_text: Annotated[
        Optional[str],
        typer.Option(
            "--custom-tags",
            help="replace the tags outside the tag catalog, keeping catalog tags",
        ),
    ] = None,
    add_tags: Annotated[
        Optional[list[str]],
        typer.Option("--add-tag", "-at", autocompletion=complete_tag),
    ] = None,
    remove_tags: Annotated[
        Optional[list[str]],
        typer.Option("--remove-tag", "-rt", autocompletion=complete_tag),
    ] = None,
    links: Annotated[
        Optional[list[str]],
        typer.Option("--add-link", "-al", help="text|url, accepts multiple"),
    ] = None,
    link_index: Annotated[
        Optional[int],
        typer.Option("--link-index", "-li", help="link to change with --link-text/--link-url"),
    ] = None,
    link_text: Annotated[Optional[str], typer.Option("--link-text")] = None,
    link_url: Annotated[Optional[str], typer.Option("--link-url")] = None,
    tickets: Annotated[
        Optional[list[str]],
        typer.Option(
            "--toggle-ticket",
            "-k",
            help="select or deselect a ticket key, accepts multiple",
            autocompletion=complete_ticket,
        ),
    ] = None,
) -> None:
    """Change fields of an existing entry."""
    entry = _load_entry(date, index)

    try:
        entry = _apply_fields(
            entry,
            {
                "description": description,
                "time_range": time_range,
                "project": project,
                "entry_type": entry_type,
                "duration": duration,
                "results": results,
                "blockers": blockers,
                "reflections": reflections,
            },
        )
    except EntryFieldError as e:
        _fail(str(e))
    entry = _apply_tags(entry, tag_text, custom_tag_text, add_tags, remove_tags)
    entry = _apply_links(entry, links)
    if link_index is not None:
        if link_text is not None:
            entry = entry_service.set_link(entry, link_index, "text", link_text)
        if link_url is not None:
            entry = entry_service.set_link(entry, link_index, "url", link_url)
    entry = _apply_tickets(entry, tickets, TICKET_REPO.get_tickets())

    try:
        updated = JOURNAL_REPO.update_entry(date, index, entry)
    except JournalError as e:
        _fail(str(e))
    if not updated:
        _fail(f"No entry {index} on {date}")

    entry_view.single_entry_view(_load_entry(date, index), index)


@app.command("delete, d", no_args_is_help=True)
def delete(
    date: Annotated[str, typer.Argument(parser=parse_date, help=DATE_HELP)],
    index: int,
) -> None:
    """Delete an entry."""
    try:
        deleted = JOURNAL_REPO.delete_entry(date, index)
    except JournalError as e:
        _fail(str(e))
    if not deleted:
        _fail(f"No entry {index} on {date}")

    console = Console()
    console.print(f"[green]Deleted entry {index} on {date}[/green]")


@app.command("tickets, tk", no_args_is_help=True)
def tickets(
    date: Annotated[str, typer.Argument(parser=parse_date, help=DATE_HELP)],
    index: int,
    toggle: Annotated[
        Optional[list[str]],
        typer.Option(
            "--toggle",
            "-k",
            help="select or deselect a ticket key, accepts multiple",
            autocompletion=complete_ticket,
        ),
    ] = None,
) -> None:
    """Show an entry's tickets against the current pool and toggle them."""
    entry = _load_entry(date, index)
    pool = TICKET_REPO.get_tickets()

    view = reconcile(entry["ticket_refs"], pool)
    if toggle:
        for key in toggle:
            entry, view = entry_service.toggle_ticket(entry, key, pool)
        try:
            JOURNAL_REPO.update_entry(date, index, entry)
        except JournalError as e:
            _fail(str(e))

    ticket_view.ticket_candidates_view(view)
