# SPDX-License-Identifier: MIT

import typer

from worklog.service.time_range import mask_time_range, split_time_range


def mask(raw: str) -> None:
    """Print the normalized form of a time range as it would be stored."""
    masked = mask_time_range(raw)
    start, end = split_time_range(masked)
    typer.echo(masked)
    if start is None or end is None:
        typer.echo("(incomplete)", err=True)
