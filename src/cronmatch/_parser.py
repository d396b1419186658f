from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ._error import CronError, Span
from ._field import Field, FieldMatcher, Values, parse_field

logger = logging.getLogger(__name__)

_FIELD_RE = re.compile(r"\S+")

_FIVE_FIELDS = (Field.MINUTE, Field.HOUR, Field.DAY, Field.MONTH, Field.WEEKDAY)
_SIX_FIELDS = (Field.SECOND, *_FIVE_FIELDS)

# 5-field expressions only fire at the top of the minute.
_SECOND_ZERO = Values((0,))


@dataclass(frozen=True, slots=True)
class CronData:
    source: str
    second: FieldMatcher
    minute: FieldMatcher
    hour: FieldMatcher
    day: FieldMatcher
    month: FieldMatcher
    weekday: FieldMatcher


def parse(input_text: str) -> CronData:
    """Parse ``minute hour day month weekday``; seconds are fixed to 0."""
    matchers = _parse_fields(input_text, _FIVE_FIELDS)
    return CronData(input_text, _SECOND_ZERO, *matchers)


def parse_with_seconds(input_text: str) -> CronData:
    """Parse ``second minute hour day month weekday``."""
    matchers = _parse_fields(input_text, _SIX_FIELDS)
    return CronData(input_text, *matchers)


def _parse_fields(input_text: str, fields: tuple[Field, ...]) -> list[FieldMatcher]:
    tokens = list(_FIELD_RE.finditer(input_text))
    if len(tokens) != len(fields):
        err = CronError.field_count(str(len(fields)), len(tokens))
        logger.debug("rejected cron expression %r: %s", input_text, err)
        raise err

    matchers: list[FieldMatcher] = []
    for token, field in zip(tokens, fields):
        try:
            matcher = parse_field(token.group(), field, field.min_value, field.max_value)
        except CronError as err:
            err.with_location(Span(token.start(), token.end()), input_text)
            logger.debug("rejected cron expression %r: %s", input_text, err)
            raise
        matchers.append(matcher)

    logger.debug("parsed cron expression %r", input_text)
    return matchers
