from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import pytest


def parse_stamp(s: str) -> datetime:
    """Parse '2024-01-01T12:00:00Z' into a UTC-aware datetime."""
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


@pytest.fixture
def stamp() -> Callable[[str], datetime]:
    return parse_stamp


@pytest.fixture
def new_year() -> datetime:
    return datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
