from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class Span:
    start: int
    end: int


CronErrorKind = Literal["field_count", "invalid_field", "out_of_range", "invalid_step"]


class CronError(Exception):
    """Raised when a cron expression cannot be parsed.

    Only the attributes relevant to ``kind`` are set; the rest stay ``None``:

    - ``field_count``: ``expected``, ``got``
    - ``invalid_field``: ``field``, ``value``, ``reason``
    - ``out_of_range``: ``field``, ``value``, ``min``, ``max``
    - ``invalid_step``: ``field``, ``step``
    """

    kind: CronErrorKind
    field: str | None
    value: str | int | None
    reason: str | None
    expected: str | None
    got: int | None
    min: int | None
    max: int | None
    step: int | None
    span: Span | None
    input_text: str | None

    def __init__(
        self,
        kind: CronErrorKind,
        message: str,
        *,
        field: str | None = None,
        value: str | int | None = None,
        reason: str | None = None,
        expected: str | None = None,
        got: int | None = None,
        min: int | None = None,
        max: int | None = None,
        step: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.field = field
        self.value = value
        self.reason = reason
        self.expected = expected
        self.got = got
        self.min = min
        self.max = max
        self.step = step
        self.span = None
        self.input_text = None

    @classmethod
    def field_count(cls, expected: str, got: int) -> CronError:
        return cls(
            "field_count",
            f"invalid field count: expected {expected}, got {got}",
            expected=expected,
            got=got,
        )

    @classmethod
    def invalid_field(cls, field: str, value: str, reason: str) -> CronError:
        return cls(
            "invalid_field",
            f"invalid {field} field '{value}': {reason}",
            field=field,
            value=value,
            reason=reason,
        )

    @classmethod
    def out_of_range(cls, field: str, value: int, min_val: int, max_val: int) -> CronError:
        return cls(
            "out_of_range",
            f"{field} value {value} out of range ({min_val}-{max_val})",
            field=field,
            value=value,
            min=min_val,
            max=max_val,
        )

    @classmethod
    def invalid_step(cls, field: str, step: int) -> CronError:
        return cls(
            "invalid_step",
            f"invalid step {step} for {field} field",
            field=field,
            step=step,
        )

    def with_location(self, span: Span, input_text: str) -> CronError:
        """Attach the position of the offending field within the whole expression."""
        self.span = span
        self.input_text = input_text
        return self

    def display_rich(self) -> str:
        if self.span and self.input_text is not None:
            out = f"error: {self}\n"
            out += f"  {self.input_text}\n"
            padding = " " * (self.span.start + 2)
            underline = "^" * max(self.span.end - self.span.start, 1)
            return out + padding + underline
        return f"error: {self}"
