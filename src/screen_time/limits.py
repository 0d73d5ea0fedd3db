"""Daily screen time limit check."""

from __future__ import annotations

from datetime import timedelta

from .usage_log import UsageLog

LIMIT_WARNING = "You have exceeded your daily screen time limit!"


def limit_exceeded(log: UsageLog, now: int, limit: int | timedelta) -> bool:
    """Return True once today's accumulated usage meets or passes ``limit``."""
    if isinstance(limit, timedelta):
        limit = int(limit.total_seconds() * 1000)
    return log.today_usage(now) >= limit
