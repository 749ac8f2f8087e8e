"""Boundary parsing for the naive ``HH:MM`` and ``YYYY-MM-DD`` strings.

Bookings keep their dates and times as zero-padded strings so that plain
string comparison is chronological. Everything that enters the engine from
outside goes through these helpers first; the arithmetic in
``roombook.services.conflicts`` never sees a malformed value.
"""

from __future__ import annotations

import re
from datetime import date, time

from roombook.exceptions import ParseError, ParseErrorKind

_TIME_RE = re.compile(r"^(\d{2}):(\d{2})$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_time(value: str) -> time:
    """Parse a 24-hour ``HH:MM`` string into a ``datetime.time``.

    Raises ``ParseError`` with kind ``malformed`` when the shape is wrong and
    ``out_of_range`` when hours or minutes fall outside 0-23 / 0-59.
    """
    match = _TIME_RE.match(value) if isinstance(value, str) else None
    if match is None:
        raise ParseError(
            ParseErrorKind.MALFORMED, str(value), f"Invalid time {value!r}, expected HH:MM"
        )
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ParseError(
            ParseErrorKind.OUT_OF_RANGE, value, f"Time {value!r} is out of range"
        )
    return time(hours, minutes)


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string into a ``datetime.date``."""
    if not isinstance(value, str) or _DATE_RE.match(value) is None:
        raise ParseError(
            ParseErrorKind.MALFORMED,
            str(value),
            f"Invalid date {value!r}, expected YYYY-MM-DD",
        )
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ParseError(
            ParseErrorKind.OUT_OF_RANGE, value, f"Date {value!r} does not exist"
        ) from exc


def format_time(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def canonical_time(value: str) -> str:
    """Validate *value* and return it in canonical ``HH:MM`` form."""
    return format_time(parse_time(value))


def canonical_date(value: str) -> str:
    """Validate *value* and return it in canonical ``YYYY-MM-DD`` form."""
    return parse_date(value).isoformat()
