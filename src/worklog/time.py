# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum

DATE_FORMAT = "YYYY-MM-DD"

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_str() -> str:
    return pendulum.today("local").format(DATE_FORMAT)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def is_date_str(value: str) -> bool:
    """Check that ``value`` is a real calendar date in 'YYYY-MM-DD' format."""
    if not _DATE_PATTERN.match(value):
        return False
    try:
        pendulum.from_format(value, DATE_FORMAT)
    except ValueError:
        return False
    return True


def date_str_offset(days: int) -> str:
    """Return the local date ``days`` away from today as 'YYYY-MM-DD'."""
    return pendulum.today("local").add(days=days).format(DATE_FORMAT)


def date_to_display_str(date_str: str) -> str:
    """Format a 'YYYY-MM-DD' string as 'YYYY-MM-DD ddd'."""
    return pendulum.from_format(date_str, DATE_FORMAT).format("YYYY-MM-DD ddd")


def month_of_date_str(date_str: str) -> str:
    """Return the 'YYYY-MM' month a 'YYYY-MM-DD' string belongs to."""
    return pendulum.from_format(date_str, DATE_FORMAT).format("YYYY-MM")
