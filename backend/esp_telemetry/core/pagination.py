"""Pagination — pure parsing of the limit/offset query parameters.

Invariants:
    - limit is always in 1..MAX_LIMIT; offset is always >= 0
    - Invalid or out-of-range input never raises: the default is retained

Design Decisions:
    - Raw strings in, ints out: the route takes the query values as text so a
      bad value falls back silently instead of producing a 422
"""

import re

DEFAULT_LIMIT = 10
MAX_LIMIT = 100
DEFAULT_OFFSET = 0

# int() alone would also accept "1_0" and surrounding whitespace
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw: str | None) -> int | None:
    if raw is None or not _INTEGER.fullmatch(raw):
        return None
    return int(raw)


def parse_limit(raw: str | None) -> int:
    """Page size; defaults to 10 unless raw is an integer in 1..100."""
    value = _parse_int(raw)
    if value is None or not 0 < value <= MAX_LIMIT:
        return DEFAULT_LIMIT
    return value


def parse_offset(raw: str | None) -> int:
    """Rows to skip; defaults to 0 unless raw is a non-negative integer."""
    value = _parse_int(raw)
    if value is None or value < 0:
        return DEFAULT_OFFSET
    return value
