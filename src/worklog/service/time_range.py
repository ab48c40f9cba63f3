# SPDX-License-Identifier: MIT

import re
from typing import Optional

MAX_TIME_RANGE_LENGTH = 11  # "HH:MM-HH:MM"

_COMPLETE_TIME_RANGE = re.compile(r"^(\d{2}:\d{2})-(\d{2}:\d{2})$")
_COMPLETE_TIME = re.compile(r"^\d{2}:\d{2}$")


def _format_time_digits(digits: str) -> str:
    if len(digits) >= 3:
        return digits[:2] + ":" + digits[2:]
    return digits


def mask_time_range(raw: Optional[str]) -> str:
    """
    Normalize raw time-range input into a prefix of ``HH:MM-HH:MM``.

    Only the digits of the input are consulted, so existing separators and the
    cursor position while editing never matter:

    - up to 4 digits form the start time, a colon is inserted once a third
      digit exists ("1430" -> "14:30", "14" -> "14")
    - digits 5 to 8 form the end time, separated by "-" and formatted the same
      way ("1430163" -> "14:30-16:3")
    - digits past the 8th are dropped

    Never raises; empty or digit-free input gives "".
    """
    if not raw:
        return ""

    digits = "".join(char for char in raw if char in "0123456789")

    if len(digits) <= 4:
        masked = _format_time_digits(digits)
    else:
        start = digits[:4]
        end = digits[4:8]
        masked = _format_time_digits(start) + "-" + _format_time_digits(end)

    return masked[:MAX_TIME_RANGE_LENGTH]


def is_complete_time_range(value: Optional[str]) -> bool:
    if value is None:
        return False
    return _COMPLETE_TIME_RANGE.match(value) is not None


def split_time_range(value: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """
    Split a masked time range into its complete ``HH:MM`` halves.

    An incomplete half is returned as None, e.g. "14:30-16" -> ("14:30", None).
    """
    if not value:
        return (None, None)

    start, _, end = value.partition("-")
    return (
        start if _COMPLETE_TIME.match(start) else None,
        end if _COMPLETE_TIME.match(end) else None,
    )
