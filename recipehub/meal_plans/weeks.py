from __future__ import annotations

import re
from datetime import date, timedelta

from ..errors import InvalidInputError

WEEK_PATTERN = re.compile(r"^\d{4}-\d{2}$")


def week_date_range(week: str) -> tuple[date, date]:
    """
    Return the inclusive ``(start, end)`` dates of a ``"YYYY-WW"`` week.

    Weeks are counted in 7-day blocks from January 1st, so week 01 is
    Jan 1 - Jan 7 regardless of weekday.
    """
    if not WEEK_PATTERN.match(week):
        raise InvalidInputError(f'Invalid week {week!r}, expected "YYYY-WW"')
    year, number = (int(part) for part in week.split("-"))
    if not 1 <= number <= 53 or year < 1:
        raise InvalidInputError(f"Invalid week {week!r}")
    start = date(year, 1, 1) + timedelta(days=(number - 1) * 7)
    return start, start + timedelta(days=6)
