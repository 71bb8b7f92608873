"""Gregorian calendar rules.

Pure functions over plain integers.  No external date library is involved:
leap years and month lengths are computed here, and the month rollover used
by ``CalendarDate.add`` relies on Python's floor division, which already
yields a non-negative remainder for a positive divisor.
"""

from __future__ import annotations

from .errors import InvalidInput

MIN_YEAR = 1000
MAX_YEAR = 9999

MONTHS_PER_YEAR = 12

# Index 0 is unused; February is the non-leap length.
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True if *year* has a February 29th.

    Divisible by 4, and either not divisible by 100 or divisible by 400.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def last_day_of_month(year: int, month: int) -> int:
    """Return the length of *month* in *year* (28..31).

    Raises:
        InvalidInput: If *month* is not in 1..12.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise InvalidInput("CalendarDate.last_day_of_month: month must be 1..12")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def roll_months(year: int, month: int, count: int) -> tuple[int, int]:
    """Shift (year, month) by *count* months, carrying into the year.

    Works on a zero-based month index so that both overflow and underflow
    use the same floor-division rule:

        roll_months(2019, 1, -1)  -> (2018, 12)
        roll_months(2019, 1, 13)  -> (2020, 2)
        roll_months(2019, 1, -13) -> (2017, 12)
    """
    raw = month - 1 + count
    return year + raw // MONTHS_PER_YEAR, raw % MONTHS_PER_YEAR + 1


def clamp_day(year: int, month: int, day: int) -> int:
    """Return *day* limited to the last day of the given month."""
    return min(day, last_day_of_month(year, month))
