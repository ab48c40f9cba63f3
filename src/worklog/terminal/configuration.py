# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from worklog import configuration
from worklog.logger import LOG_LEVELS
from worklog.repository.configuration import CONFIGURATION_REPO
from worklog.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.lower() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of {', '.join(LOG_LEVELS)}")
    return log_level.lower()


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("default_entry_type", config["default_entry_type"])
    table.add_row("entry_types", ", ".join(config["entry_types"]))
    table.add_row("jql_query", config["jql_query"] or "None")
    table.add_row("ticket_source_path", config["ticket_source_path"] or "None (mock)")
    table.add_row("log_level", config["log_level"])
    table.add_row("tag_emphasis_base", str(config.get("tag_emphasis_base", 10)))
    table.add_row("tag_emphasis_per_unit", str(config.get("tag_emphasis_per_unit", 2)))
    table.add_row("tag_emphasis_max", str(config.get("tag_emphasis_max", 16)))

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show the view header"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding the journal data"),
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="Use the default data directory")
    ] = False,
    default_entry_type: Annotated[
        Optional[str], typer.Option("--default-entry-type")
    ] = None,
    entry_types: Annotated[
        Optional[list[str]],
        typer.Option("--entry-type", help="Replace the entry types (accepts multiple)"),
    ] = None,
    ticket_source_path: Annotated[
        Optional[str],
        typer.Option("--ticket-source", help="Saved search result file (JSON)"),
    ] = None,
    remove_ticket_source_path: Annotated[
        bool, typer.Option("--remove-ticket-source", help="Use mock tickets")
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", callback=validate_log_level),
    ] = None,
    tag_emphasis_base: Annotated[Optional[int], typer.Option("--tag-emphasis-base")] = None,
    tag_emphasis_per_unit: Annotated[
        Optional[int], typer.Option("--tag-emphasis-per-unit")
    ] = None,
    tag_emphasis_max: Annotated[Optional[int], typer.Option("--tag-emphasis-max")] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        default_entry_type=default_entry_type,
        entry_types=entry_types,
        ticket_source_path=ticket_source_path,
        remove_ticket_source_path=remove_ticket_source_path,
        log_level=log_level,
        tag_emphasis_base=tag_emphasis_base,
        tag_emphasis_per_unit=tag_emphasis_per_unit,
        tag_emphasis_max=tag_emphasis_max,
    )

    console = Console()
    console.print("[green]Configuration updated[/green]")
