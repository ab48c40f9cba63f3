# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from worklog.logger import configure_logging
from worklog.terminal import configuration, entry, ticket
from worklog.terminal.catalog import project_app, tag_app
from worklog.terminal.configuration import validate_log_level
from worklog.terminal.custom_typer import OrderedAliasedTyperGroup
from worklog.terminal.mask import mask
from worklog.terminal.report import report
from worklog.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Worklog - a work journal in the CLI",
    no_args_is_help=True,
)
app.add_typer(entry.app, name="entry, e")
app.add_typer(ticket.app, name="ticket, tk")
app.add_typer(project_app, name="project, p")
app.add_typer(tag_app, name="tag, tg")
app.add_typer(configuration.app, name="config, c")
app.command(name="report, r")(report)
app.command(name="mask, m")(mask)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="debug, info, warning, error or critical",
            callback=validate_log_level,
        ),
    ] = None,
) -> None:
    """
    Worklog - a work journal in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if log_level is not None:
        configure_logging(log_level)


def run() -> None:
    app()
