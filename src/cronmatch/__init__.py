from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

from ._calendar import day_of_week, days_in_month, is_leap_year
from ._error import CronError, CronErrorKind, Span
from ._eval import SEARCH_HORIZON_YEARS, Instant
from ._eval import between as _between
from ._eval import matches as _matches
from ._eval import matches_datetime as _matches_datetime
from ._eval import next_after as _next_after
from ._eval import next_from as _next_from
from ._eval import next_n_after as _next_n_after
from ._eval import next_n_from as _next_n_from
from ._eval import occurrences as _occurrences
from ._field import AnyValue, Field, FieldMatcher, Values, parse_field
from ._parser import CronData
from ._parser import parse as _parse
from ._parser import parse_with_seconds as _parse_with_seconds


class Expression:
    """A parsed, immutable cron expression.

    Instances hold no mutable state and can be shared freely between threads.
    """

    __slots__ = ("_data",)

    _data: CronData

    def __init__(self, data: CronData) -> None:
        self._data = data

    @classmethod
    def parse(cls, input_text: str) -> Expression:
        return cls(_parse(input_text))

    @classmethod
    def parse_with_seconds(cls, input_text: str) -> Expression:
        return cls(_parse_with_seconds(input_text))

    @classmethod
    def validate(cls, input_text: str, *, with_seconds: bool = False) -> bool:
        try:
            if with_seconds:
                _parse_with_seconds(input_text)
            else:
                _parse(input_text)
            return True
        except CronError:
            return False

    def matches(
        self,
        second: int,
        minute: int,
        hour: int,
        day: int,
        month: int,
        weekday: int,
    ) -> bool:
        """True when every field accepts its value. Weekday 0 is Sunday."""
        return _matches(self._data, second, minute, hour, day, month, weekday)

    def next_after(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
    ) -> Instant | None:
        """Returns the first `(year, month, day, hour, minute, second)` strictly
        after the given instant, or None if nothing matches within
        `SEARCH_HORIZON_YEARS` of `year`.
        """
        return _next_after(self._data, year, month, day, hour, minute, second)

    def next_n_after(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        n: int,
    ) -> list[Instant]:
        return _next_n_after(self._data, year, month, day, hour, minute, second, n)

    def matches_datetime(self, dt: datetime) -> bool:
        return _matches_datetime(self._data, dt)

    def next_from(self, now: datetime) -> datetime | None:
        return _next_from(self._data, now)

    def next_n_from(self, now: datetime, n: int) -> list[datetime]:
        return _next_n_from(self._data, now, n)

    def occurrences(self, from_: datetime) -> Iterator[datetime]:
        """Returns a lazy iterator of occurrences starting after `from_`.

        The iterator is unbounded for expressions that keep firing; it ends only
        when a search from the last occurrence finds nothing within the horizon.
        """
        return _occurrences(self._data, from_)

    def between(self, from_: datetime, to: datetime) -> Iterator[datetime]:
        """Returns a bounded iterator of occurrences where `from_ < occurrence <= to`."""
        return _between(self._data, from_, to)

    def as_str(self) -> str:
        return self._data.source

    def __str__(self) -> str:
        return self._data.source

    def __repr__(self) -> str:
        return f"Expression({self._data.source!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    @property
    def source(self) -> str:
        return self._data.source

    @property
    def has_seconds(self) -> bool:
        """Whether the expression was parsed with an explicit seconds field."""
        return len(self._data.source.split()) == 6

    @property
    def data(self) -> CronData:
        return self._data

    @property
    def second(self) -> FieldMatcher:
        return self._data.second

    @property
    def minute(self) -> FieldMatcher:
        return self._data.minute

    @property
    def hour(self) -> FieldMatcher:
        return self._data.hour

    @property
    def day(self) -> FieldMatcher:
        return self._data.day

    @property
    def month(self) -> FieldMatcher:
        return self._data.month

    @property
    def weekday(self) -> FieldMatcher:
        return self._data.weekday


def parse(input_text: str) -> Expression:
    """Parse a 5-field expression: `minute hour day month weekday`."""
    return Expression.parse(input_text)


def parse_with_seconds(input_text: str) -> Expression:
    """Parse a 6-field expression: `second minute hour day month weekday`."""
    return Expression.parse_with_seconds(input_text)


__all__ = [
    "Expression",
    "parse",
    "parse_with_seconds",
    "parse_field",
    "CronData",
    "CronError",
    "CronErrorKind",
    "Span",
    "Field",
    "FieldMatcher",
    "AnyValue",
    "Values",
    "Instant",
    "SEARCH_HORIZON_YEARS",
    "is_leap_year",
    "days_in_month",
    "day_of_week",
]
