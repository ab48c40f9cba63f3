# SPDX-License-Identifier: MIT

import re
from typing import Optional

import typer

from worklog.time import date_str_offset, is_date_str, today_str


def parse_date(date_param: Optional[str | int]) -> Optional[str]:
    """
    Parse a journal date option into 'YYYY-MM-DD'.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o and day offsets such
    as 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        if not is_date_str(date):
            raise typer.BadParameter(f"Not a calendar date: {date}")
        return date

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return date_str_offset(int(date))

    if date == "today" or date == "t":
        return today_str()
    if date == "yesterday" or date == "y":
        return date_str_offset(-1)
    if date == "tomorrow" or date == "o":
        return date_str_offset(1)
    raise typer.BadParameter("Incorrect date format")


def parse_link(link_param: str) -> tuple[str, str]:
    """
    Parse a link option written as "text|url".

    Without a "|" the whole value is taken as the url.
    """
    if "|" in link_param:
        text, _, url = link_param.partition("|")
        return (text.strip(), url.strip())
    return ("", link_param.strip())
