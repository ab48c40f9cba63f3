# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from worklog.model.entry import Entry
from worklog.service.time_range import is_complete_time_range
from worklog.time import date_to_display_str
from worklog.view.util import format_links, format_tags, format_ticket_refs
from worklog.view.views.header import header


def entries_view(
    date: str,
    entries: list[Entry],
    columns: list[str] = [
        "index",
        "time_range",
        "project",
        "entry_type",
        "duration",
        "description",
        "tags",
        "tickets",
    ],
    no_wrap: bool = False,
) -> None:
    """Display the entries of one journal day."""
    header(f"journal {date_to_display_str(date)}")

    entries_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap and column not in ("index",):
            entries_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            entries_table.add_column(column)

    for index, entry in enumerate(entries):
        row = []
        for column in columns:
            column_value = ""
            if column == "index":
                column_value = str(index)
            elif column == "tags":
                column_value = format_tags(entry["tags"])
            elif column == "tickets":
                column_value = format_ticket_refs(entry["ticket_refs"])
            elif column == "time_range":
                column_value = entry["time_range"] or ""
                if column_value and not is_complete_time_range(column_value):
                    column_value = f"[dim]{column_value}[/dim]"
            elif column == "links":
                column_value = format_links(entry["links"])
            elif entry.get(column) is not None:
                column_value = str(entry[column])  # type: ignore[literal-required]
            row.append(column_value)
        entries_table.add_row(*row)

    console = Console()
    console.print(entries_table)


def single_entry_view(entry: Entry, index: int) -> None:
    """Display detailed view of a single entry."""
    header("entry")

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("date", entry["date"])
    entry_table.add_row("index", str(index))
    entry_table.add_row("time_range", entry["time_range"] or "")
    entry_table.add_row("project", entry["project"])
    entry_table.add_row("entry_type", entry["entry_type"])
    entry_table.add_row("description", entry["description"])
    entry_table.add_row("duration", entry["duration"])
    entry_table.add_row("results", entry["results"])
    entry_table.add_row("blockers", entry["blockers"])
    entry_table.add_row("reflections", entry["reflections"])
    entry_table.add_row("tags", format_tags(entry["tags"]))
    entry_table.add_row("links", format_links(entry["links"]))

    tickets = []
    for ref in entry["ticket_refs"]:
        summary = ref.get("summary")
        tickets.append(f"{ref['key']} {summary}" if summary else ref["key"])
    entry_table.add_row("tickets", "\n".join(tickets))

    console = Console()
    console.print(entry_table)


def dates_view(dates: list[str]) -> None:
    header("journal dates")

    dates_table = Table(box=box.SIMPLE)
    dates_table.add_column("date")

    for date in dates:
        dates_table.add_row(date_to_display_str(date))

    console = Console()
    console.print(dates_table)
