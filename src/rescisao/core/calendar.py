"""Calendar helpers: ISO parsing, day counts, and month/year shifting.

Out-of-range components are normalized the way a calendar rolls them over
(day 32 becomes the 1st or 2nd of the next month, month 13 becomes January of
the next year, day 0 is the last day of the previous month). Month and year
shifts keep the day-of-month and roll over the same way, so Jan 31 + 1 month
is Mar 3 in a common year and Feb 29 + 1 year is Mar 1.
"""

from __future__ import annotations

import re
from datetime import date, timedelta

from rescisao.core.exceptions import InvalidInput

_MONTH_KEY = re.compile(r"^(\d{4})-(\d{2})$")


def normalized_date(year: int, month: int, day: int) -> date:
    """Build a date, rolling overflowing month/day values into later periods."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def parse_iso_date(value: str | date) -> date:
    """Parse ``YYYY-MM-DD`` into a date.

    Raises:
        InvalidInput: if the string is not a numeric year-month-day triple.
    """
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidInput(f"Expected an ISO date string, got {value!r}")
    parts = value.strip().split("-")
    if len(parts) != 3:
        raise InvalidInput(f"Invalid ISO date {value!r}")
    try:
        year, month, day = (int(p) for p in parts)
        return normalized_date(year, month, day)
    except (ValueError, OverflowError) as exc:
        raise InvalidInput(f"Invalid ISO date {value!r}: {exc}") from exc


def day_difference(a: date, b: date) -> int:
    """Absolute number of whole days between two dates."""
    return abs((a - b).days)


def shift_months(d: date, months: int) -> date:
    return normalized_date(d.year, d.month + months, d.day)


def shift_years(d: date, years: int) -> date:
    return normalized_date(d.year + years, d.month, d.day)


def months_between(start: date, end: date) -> int:
    """Calendar-month difference, ignoring the day of month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def last_day_of_month(d: date) -> int:
    return (normalized_date(d.year, d.month + 1, 1) - timedelta(days=1)).day


def month_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def parse_month_key(key: str) -> date:
    """Return the first day of the month named by a ``YYYY-MM`` key."""
    match = _MONTH_KEY.match(key.strip()) if isinstance(key, str) else None
    if match is None:
        raise InvalidInput(f"Invalid month key {key!r}, expected YYYY-MM")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12 or year < 1:
        raise InvalidInput(f"Invalid month key {key!r}, month out of range")
    return date(year, month, 1)
