"""Text formatting for durations and timestamps."""

from __future__ import annotations

from datetime import datetime

MILLIS_PER_MINUTE = 60_000
MILLIS_PER_HOUR = 3_600_000

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"


def format_duration(millis: int) -> str:
    """Render a millisecond count as ``"<H> hours, <M> minutes"``.

    Both parts use truncating division, so negative spans round toward zero.
    """
    hours = _truncating_div(millis, MILLIS_PER_HOUR)
    minutes = _truncating_div(millis - hours * MILLIS_PER_HOUR, MILLIS_PER_MINUTE)
    return f"{hours} hours, {minutes} minutes"


def format_timestamp(instant: int) -> str:
    """Render an epoch-millisecond instant in local time."""
    return to_datetime(instant).strftime(TIMESTAMP_FMT)


def to_datetime(instant: int) -> datetime:
    return datetime.fromtimestamp(instant / 1000)


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient
