"""Iterator-specific tests for `occurrences()` and `between()` methods.

These tests verify iterator behavior beyond the single-step search:
- Laziness (generators don't evaluate eagerly)
- Early termination
- Bounds of `between()`
- Termination for expressions that never fire
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from datetime import datetime

import cronmatch

Stamp = Callable[[str], datetime]

# =============================================================================
# Laziness Tests
# =============================================================================


class TestLaziness:
    def test_occurrences_is_lazy(self, stamp: Stamp) -> None:
        """An unbounded expression should not hang when creating the iterator."""
        expr = cronmatch.parse("0 9 * * *")

        it = expr.occurrences(stamp("2024-02-01T00:00:00Z"))

        first = list(itertools.islice(it, 1))
        assert first == [stamp("2024-02-01T09:00:00Z")]

    def test_between_is_lazy(self, stamp: Stamp) -> None:
        expr = cronmatch.parse("0 9 * * *")
        it = expr.between(stamp("2024-02-01T00:00:00Z"), stamp("2024-12-31T23:59:00Z"))

        first_three = list(itertools.islice(it, 3))
        assert len(first_three) == 3

    def test_iterator_protocol(self, new_year: datetime) -> None:
        it = cronmatch.parse("* * * * *").occurrences(new_year)
        assert iter(it) is it
        assert next(it) == new_year.replace(minute=1)


# =============================================================================
# Early Termination Tests
# =============================================================================


class TestEarlyTermination:
    def test_takewhile(self, stamp: Stamp) -> None:
        expr = cronmatch.parse("0 9 * * *")
        cutoff = stamp("2024-02-05T00:00:00Z")

        results = list(
            itertools.takewhile(
                lambda dt: dt < cutoff, expr.occurrences(stamp("2024-02-01T00:00:00Z"))
            )
        )

        # Feb 1, 2, 3, 4 at 09:00
        assert len(results) == 4

    def test_find_with_next(self, stamp: Stamp) -> None:
        expr = cronmatch.parse("0 0 13 * *")

        friday = next(
            dt for dt in expr.occurrences(stamp("2024-01-01T00:00:00Z")) if dt.weekday() == 4
        )

        assert friday == stamp("2024-09-13T00:00:00Z")


# =============================================================================
# Bounds Tests
# =============================================================================


class TestBetween:
    def test_excludes_start_includes_end(self, stamp: Stamp) -> None:
        expr = cronmatch.parse("0 * * * *")
        results = list(expr.between(stamp("2024-01-01T00:00:00Z"), stamp("2024-01-01T03:00:00Z")))

        assert results == [
            stamp("2024-01-01T01:00:00Z"),
            stamp("2024-01-01T02:00:00Z"),
            stamp("2024-01-01T03:00:00Z"),
        ]

    def test_empty_window(self, stamp: Stamp) -> None:
        expr = cronmatch.parse("0 12 * * *")
        window = expr.between(stamp("2024-01-01T12:00:00Z"), stamp("2024-01-02T11:59:59Z"))
        assert list(window) == []

    def test_seconds_resolution(self, stamp: Stamp) -> None:
        expr = cronmatch.parse_with_seconds("*/20 * * * * *")
        results = list(expr.between(stamp("2024-01-01T00:00:00Z"), stamp("2024-01-01T00:01:00Z")))
        assert [dt.second for dt in results] == [20, 40, 0]


# =============================================================================
# Exhaustion Tests
# =============================================================================


class TestExhaustion:
    def test_never_firing_expression_ends(self, new_year: datetime) -> None:
        assert list(cronmatch.parse("0 0 31 2 *").occurrences(new_year)) == []

    def test_leap_day_continues_past_single_horizon(self, stamp: Stamp) -> None:
        expr = cronmatch.parse("0 0 29 2 *")
        results = list(itertools.islice(expr.occurrences(stamp("2024-01-01T00:00:00Z")), 3))
        assert [dt.year for dt in results] == [2024, 2028, 2032]
