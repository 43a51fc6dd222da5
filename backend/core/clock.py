# backend/core/clock.py
from __future__ import annotations

from core.exceptions import InvalidArgument

MINUTES_PER_DAY = 24 * 60


def parse_hhmm(value: str) -> int:
    """
    "HH:MM" -> minutes since midnight.
    Accepts 00:00..24:00 inclusive; anything else raises InvalidArgument.
    """
    if not isinstance(value, str):
        raise InvalidArgument(f"time must be an 'HH:MM' string, got {value!r}")
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise InvalidArgument(f"time must look like 'HH:MM', got {value!r}")

    hours, minutes = int(parts[0]), int(parts[1])
    if minutes >= 60:
        raise InvalidArgument(f"minutes out of range in {value!r}")
    total = hours * 60 + minutes
    if total > MINUTES_PER_DAY:
        raise InvalidArgument(f"time past end of day: {value!r}")
    return total


def format_hhmm(minutes: int) -> str:
    if minutes < 0 or minutes > MINUTES_PER_DAY:
        raise InvalidArgument(f"minutes out of range: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
