"""Field formatters applied to TMS orders.

Every formatter is total: when a value cannot be parsed it is returned
unchanged instead of raising.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Optional

from .logging_setup import get_logger

logger = get_logger(__name__)

# Offsets and "Z" are accepted but ignored: the wall clock is rendered as given.
_DATE_TIME_RE = re.compile(
    r"^(\d{4})-(\d{1,2})-(\d{1,2})"
    r"(?:[T ](\d{1,2}):(\d{2})(?::(\d{2})(?:[.,]\d+)?)?)?"
    r"\s*(?:Z|[+-]\d{2}(?::?\d{2})?)?$",
    re.IGNORECASE,
)

_TIME_12H_RE = re.compile(r"(\d{1,2}):(\d{2}):(\d{2})\s*(AM|PM)", re.IGNORECASE)


def _parse_date_time(value: str) -> Optional[datetime]:
    match = _DATE_TIME_RE.match(value.strip())
    if not match:
        return None
    year, month, day, hour, minute, second = (int(g) if g else 0 for g in match.groups())
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError:
        return None


def format_pick_date_time(value: Any) -> Any:
    """Render an ISO-8601 timestamp as ``YYYY-MM-DD HH:MM:SS``.

    ``"0001-01-01T00:00:00Z"`` becomes ``"0001-01-01 00:00:00"``. Empty input
    gives ``""``; anything unparseable is returned as-is.
    """
    if not value:
        return ""
    if not isinstance(value, str):
        return value

    parsed = _parse_date_time(value)
    if parsed is None:
        logger.debug("Leaving unparseable pickDateTime %r unchanged", value)
        return value
    return (
        f"{parsed.year:04d}-{parsed.month:02d}-{parsed.day:02d} "
        f"{parsed.hour:02d}:{parsed.minute:02d}:{parsed.second:02d}"
    )


def _to_24_hour(part: str) -> str:
    trimmed = part.strip()
    match = _TIME_12H_RE.search(trimmed)
    if not match:
        return trimmed

    hours = int(match.group(1))
    minutes, seconds = match.group(2), match.group(3)
    period = match.group(4).upper()

    if period == "PM" and hours != 12:
        hours += 12
    elif period == "AM" and hours == 12:
        hours = 0

    return f"{hours:02d}:{minutes}:{seconds}"


def format_timeslot(value: Any) -> Any:
    """Convert a ``"9:00:00 AM..8:00:00 PM"`` range to 24-hour ``"09:00:00..20:00:00"``."""
    if not value:
        return ""
    if not isinstance(value, str):
        return value

    cleaned = re.sub(r"\s+", " ", value.strip())
    parts = cleaned.split("..")
    if len(parts) != 2:
        logger.debug("Leaving timeslot %r unchanged: expected exactly one '..'", value)
        return value

    start, end = parts
    return f"{_to_24_hour(start)}..{_to_24_hour(end)}"


def format_cod_task(value: Any) -> Any:
    if value is True:
        return 1
    if value is False:
        return 0
    return value
