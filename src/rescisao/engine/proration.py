"""Twelfths (avos) counters for the 13th salary and for vacation.

Both apply the same legal rule, a partial month worth at least 15 days counts
as a full twelfth, but anchor differently: the 13th salary follows the civil
calendar year while vacation follows the employment anniversary. They are kept
as separate counters sharing only ``counts_as_twelfth``.
"""

from __future__ import annotations

from datetime import date

from rescisao.core.calendar import (
    day_difference,
    last_day_of_month,
    normalized_date,
    shift_months,
    shift_years,
)

MIN_FRAGMENT_DAYS = 15
MAX_TWELFTHS = 12


def counts_as_twelfth(days: int, min_days: int = MIN_FRAGMENT_DAYS) -> bool:
    return days >= min_days


# ---------------------------------------------------------------------------
# 13th salary: civil-year anchor
# ---------------------------------------------------------------------------

def thirteenth_period_start(hire_date: date, termination_date: date) -> date:
    """January 1st of the termination year, or the hire date if later."""
    return max(hire_date, date(termination_date.year, 1, 1))


def thirteenth_twelfths(
    period_start: date,
    period_end: date,
    *,
    min_days: int = MIN_FRAGMENT_DAYS,
    max_twelfths: int = MAX_TWELFTHS,
) -> int:
    """Count civil months in [period_start, period_end] worked for ``min_days`` or more.

    Only months in the start year or the end year are considered. Boundary
    months are clipped to the period before the threshold is applied.
    """
    if period_end < period_start:
        return 0
    twelfths = 0
    cursor = date(period_start.year, period_start.month, 1)
    while cursor <= period_end:
        if cursor.year in (period_start.year, period_end.year):
            first_day = 1
            last_day = last_day_of_month(cursor)
            if (cursor.year, cursor.month) == (period_start.year, period_start.month):
                first_day = period_start.day
            if (cursor.year, cursor.month) == (period_end.year, period_end.month):
                last_day = period_end.day
            if counts_as_twelfth(last_day - first_day + 1, min_days):
                twelfths += 1
        cursor = normalized_date(cursor.year, cursor.month + 1, 1)
    return min(twelfths, max_twelfths)


# ---------------------------------------------------------------------------
# Vacation: anniversary anchor
# ---------------------------------------------------------------------------

def acquisition_period_start(hire_date: date, termination_date: date) -> date:
    """Most recent hire anniversary not after the termination date."""
    start = hire_date
    while shift_years(start, 1) <= termination_date:
        start = shift_years(start, 1)
    return start


def vacation_twelfths(
    acquisition_start: date,
    period_end: date,
    *,
    min_days: int = MIN_FRAGMENT_DAYS,
    max_twelfths: int = MAX_TWELFTHS,
) -> int:
    """Count anniversary months from ``acquisition_start`` up to ``period_end``.

    A month counts when it completes on or before ``period_end``; the trailing
    fragment counts when it spans ``min_days`` or more (both ends inclusive).
    """
    twelfths = 0
    cursor = acquisition_start
    while cursor < period_end:
        month_end = shift_months(cursor, 1)
        if month_end > period_end:
            if counts_as_twelfth(day_difference(period_end, cursor) + 1, min_days):
                twelfths += 1
        else:
            twelfths += 1
        cursor = month_end
    return min(twelfths, max_twelfths)


def projected_delta(plain: int, projected: int) -> int:
    """Extra twelfths attributable purely to the notice projection."""
    return max(0, projected - plain)
