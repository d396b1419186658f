from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._error import CronError


class Field(Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    WEEKDAY = "weekday"

    @property
    def min_value(self) -> int:
        return _FIELD_BOUNDS[self][0]

    @property
    def max_value(self) -> int:
        return _FIELD_BOUNDS[self][1]

    def __str__(self) -> str:
        return self.value


_FIELD_BOUNDS: dict[Field, tuple[int, int]] = {
    Field.SECOND: (0, 59),
    Field.MINUTE: (0, 59),
    Field.HOUR: (0, 23),
    Field.DAY: (1, 31),
    Field.MONTH: (1, 12),
    Field.WEEKDAY: (0, 6),  # 0 = Sunday
}


# --- Field matcher ---


@dataclass(frozen=True, slots=True)
class AnyValue:
    """Field written as a bare ``*``."""

    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True, slots=True)
class Values:
    """Explicit set of accepted values, ascending and without duplicates."""

    values: tuple[int, ...]

    def __str__(self) -> str:
        return ",".join(str(v) for v in self.values)


FieldMatcher = AnyValue | Values


def field_matches(matcher: FieldMatcher, value: int) -> bool:
    match matcher:
        case AnyValue():
            return True
        case Values(values=values):
            return value in values


# --- Parsing ---


def parse_field(text: str, field: Field | str, min_val: int, max_val: int) -> FieldMatcher:
    """Parse one cron field into a matcher for the domain ``[min_val, max_val]``.

    ``field`` names the field in errors; a ``Field`` member reports its value.

    Single values and explicit range endpoints must lie inside the domain.
    Values produced by a step expression (``*/n``, ``a/n``, ``a-b/n``) that fall
    outside it are dropped instead.
    """
    if text == "*":
        return AnyValue()

    name = str(field)
    values: set[int] = set()

    for part in text.split(","):
        if "/" in part:
            values.update(_expand_step(part, name, min_val, max_val))
        elif "-" in part:
            start, end = _parse_range(part, part, name)
            # Report the first value of the range outside the domain.
            if start < min_val:
                raise CronError.out_of_range(name, start, min_val, max_val)
            if end > max_val:
                raise CronError.out_of_range(name, max_val + 1, min_val, max_val)
            values.update(range(start, end + 1))
        else:
            value = _parse_number(part, part, name, "invalid value")
            _check_bounds(value, name, min_val, max_val)
            values.add(value)

    if not values:
        raise CronError.invalid_field(name, text, "no values in range")

    return Values(tuple(sorted(values)))


def _expand_step(part: str, field: str, min_val: int, max_val: int) -> list[int]:
    base, step_str = part.split("/", 1)

    step = _parse_number(step_str, part, field, "invalid step")
    if step == 0:
        raise CronError.invalid_step(field, step)

    if base == "*":
        start, end = min_val, max_val
    elif "-" in base:
        start, end = _parse_range(base, part, field)
    else:
        start = _parse_number(base, part, field, "invalid value")
        end = max_val

    return [v for v in range(start, min(end, max_val) + 1, step) if v >= min_val]


def _parse_range(text: str, part: str, field: str) -> tuple[int, int]:
    start_str, end_str = text.split("-", 1)
    start = _parse_number(start_str, part, field, "invalid range start")
    end = _parse_number(end_str, part, field, "invalid range end")
    if start > end:
        raise CronError.invalid_field(field, part, "range start > end")
    return start, end


def _parse_number(token: str, part: str, field: str, reason: str) -> int:
    # int() would also accept signs, surrounding whitespace and underscores
    if not (token.isascii() and token.isdigit()):
        raise CronError.invalid_field(field, part, reason)
    try:
        return int(token)
    except ValueError:
        # longer than the interpreter's integer string conversion limit
        raise CronError.invalid_field(field, part, reason) from None


def _check_bounds(value: int, field: str, min_val: int, max_val: int) -> None:
    if value < min_val or value > max_val:
        raise CronError.out_of_range(field, value, min_val, max_val)
