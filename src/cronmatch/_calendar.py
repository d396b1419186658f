"""Gregorian calendar helpers used by the occurrence search.

All functions are pure and work on plain integers so the search never has to
build ``date`` objects for candidates that may not exist (e.g. February 30).
"""

from __future__ import annotations

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year``; unknown months count as 31."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if 1 <= month <= 12:
        return _DAYS_IN_MONTH[month - 1]
    return 31


def day_of_week(year: int, month: int, day: int) -> int:
    """Day of week via Zeller's congruence, 0 = Sunday ... 6 = Saturday."""
    # January and February count as months 13 and 14 of the previous year.
    if month < 3:
        month += 12
        year -= 1
    k = year % 100
    j = year // 100
    # h: 0 = Saturday, 1 = Sunday, ...
    h = (day + (13 * (month + 1)) // 5 + k + k // 4 + j // 4 - 2 * j) % 7
    return (h + 6) % 7
