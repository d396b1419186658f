from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import MAXYEAR, datetime

from ._calendar import day_of_week, days_in_month
from ._field import field_matches
from ._parser import CronData

logger = logging.getLogger(__name__)

# =============================================================================
# Search Horizon
# =============================================================================
# SEARCH_HORIZON_YEARS (4): next_after gives up once the candidate year passes
# start_year + 4. Ordinary schedules fire well inside that window; Feb 29
# schedules starting after Feb 2096 wait until 2104 and report None.
#
# The search walks forward from start + 1 second. When a coarser field fails,
# the rest of that unit is skipped in one step:
#
#   month fails          -> day 1 of the next month, 00:00:00
#   day / weekday fails  -> next day, 00:00:00
#   hour fails           -> next hour, :00:00
#   minute fails         -> next minute, :00
#   second fails         -> next second
#
# Every skipped instant carries the same failing value, so the result is the
# same as checking each second in turn.
# =============================================================================

SEARCH_HORIZON_YEARS = 4

Instant = tuple[int, int, int, int, int, int]


def matches(
    data: CronData,
    second: int,
    minute: int,
    hour: int,
    day: int,
    month: int,
    weekday: int,
) -> bool:
    return (
        field_matches(data.second, second)
        and field_matches(data.minute, minute)
        and field_matches(data.hour, hour)
        and field_matches(data.day, day)
        and field_matches(data.month, month)
        and field_matches(data.weekday, weekday)
    )


def next_after(
    data: CronData,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
) -> Instant | None:
    max_year = year + SEARCH_HORIZON_YEARS
    y, mo, d, h, mi, s = year, month, day, hour, minute, second + 1

    while True:
        # Carry overflow upward, one unit at a time.
        if s > 59:
            s = 0
            mi += 1
        if mi > 59:
            mi = 0
            h += 1
        if h > 23:
            h = 0
            d += 1
        if d > days_in_month(y, mo):
            d = 1
            mo += 1
        if mo > 12:
            mo = 1
            y += 1

        if y > max_year:
            logger.debug(
                "no occurrence of %r within %d years of %04d-%02d-%02d %02d:%02d:%02d",
                data.source,
                SEARCH_HORIZON_YEARS,
                year,
                month,
                day,
                hour,
                minute,
                second,
            )
            return None

        if not field_matches(data.month, mo):
            mo += 1
            d, h, mi, s = 1, 0, 0, 0
            continue

        weekday = day_of_week(y, mo, d)
        if not (field_matches(data.day, d) and field_matches(data.weekday, weekday)):
            d += 1
            h, mi, s = 0, 0, 0
            continue

        if not field_matches(data.hour, h):
            h += 1
            mi, s = 0, 0
            continue

        if not field_matches(data.minute, mi):
            mi += 1
            s = 0
            continue

        if not field_matches(data.second, s):
            s += 1
            continue

        return (y, mo, d, h, mi, s)


def next_n_after(
    data: CronData,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    n: int,
) -> list[Instant]:
    results: list[Instant] = []
    current: Instant = (year, month, day, hour, minute, second)
    for _ in range(n):
        found = next_after(data, *current)
        if found is None:
            break
        results.append(found)
        current = found
    return results


# --- datetime helpers ---
#
# A datetime's fields are read as given. tzinfo is carried over to the result
# unchanged; no conversion between zones takes place.


def matches_datetime(data: CronData, dt: datetime) -> bool:
    weekday = day_of_week(dt.year, dt.month, dt.day)
    return matches(data, dt.second, dt.minute, dt.hour, dt.day, dt.month, weekday)


def next_from(data: CronData, now: datetime) -> datetime | None:
    found = next_after(data, now.year, now.month, now.day, now.hour, now.minute, now.second)
    if found is None:
        return None
    year, month, day, hour, minute, second = found
    if year > MAXYEAR:
        return None
    return now.replace(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        microsecond=0,
    )


def next_n_from(data: CronData, now: datetime, n: int) -> list[datetime]:
    results: list[datetime] = []
    current = now
    for _ in range(n):
        nxt = next_from(data, current)
        if nxt is None:
            break
        results.append(nxt)
        current = nxt
    return results


def occurrences(data: CronData, from_: datetime) -> Iterator[datetime]:
    """Lazy iterator of occurrences strictly after `from_`.

    Each step searches a fresh horizon from the previous occurrence, so the
    iterator only ends when an expression stops firing altogether.
    """
    current = from_
    while True:
        nxt = next_from(data, current)
        if nxt is None:
            return
        yield nxt
        current = nxt


def between(data: CronData, from_: datetime, to: datetime) -> Iterator[datetime]:
    """Lazy iterator of occurrences where `from_ < occurrence <= to`."""
    for dt in occurrences(data, from_):
        if dt > to:
            return
        yield dt
