# SPDX-License-Identifier: MIT

import json
from typing import Annotated, Optional

import typer
from rich.console import Console

from worklog.errors import JournalError, ReportRangeError
from worklog.repository.catalog import PROJECT_REPO, TAG_REPO
from worklog.repository.configuration import CONFIGURATION_REPO
from worklog.repository.journal import JOURNAL_REPO
from worklog.service.report import generate_activity_report
from worklog.service.report_view import build_report_view
from worklog.terminal.parse import parse_date
from worklog.time import date_str_offset, today_str
from worklog.view.views.report import activity_report_view

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def report(
    start: Annotated[
        Optional[str],
        typer.Option(
            "--start", "-s", parser=parse_date, help=f"{DATE_HELP}, default -30"
        ),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_date, help=f"{DATE_HELP}, default today"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the aggregate as JSON")
    ] = False,
) -> None:
    """Summarize the journal over a period."""
    config = CONFIGURATION_REPO.get_config()
    period_start = start if start is not None else date_str_offset(-30)
    period_end = end if end is not None else today_str()

    try:
        activity_report = generate_activity_report(
            JOURNAL_REPO.get_entries_between(period_start, period_end),
            period_start,
            period_end,
            PROJECT_REPO.list_items(include_inactive=True),
            TAG_REPO.list_items(include_inactive=True),
        )
    except (JournalError, ReportRangeError) as e:
        console = Console()
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(activity_report, indent=2, ensure_ascii=False))
        return

    activity_report_view(
        build_report_view(
            activity_report,
            config.get("tag_emphasis_base", 10),
            config.get("tag_emphasis_per_unit", 2),
            config.get("tag_emphasis_max", 16),
        )
    )
