"""Configuration models and helpers for the screen time tracker."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(slots=True)
class TrackerSettings:
    """Runtime configuration shared by the tracker and its front ends."""

    daily_limit: timedelta = timedelta(hours=2)
    refresh_interval: timedelta = timedelta(seconds=1)
    export_filename: str = "usage_log.csv"

    @property
    def daily_limit_ms(self) -> int:
        return int(self.daily_limit.total_seconds() * 1000)

    @property
    def refresh_ms(self) -> int:
        return int(self.refresh_interval.total_seconds() * 1000)

    @classmethod
    def from_minutes(
        cls,
        limit_minutes: float,
        refresh_seconds: float | None = None,
    ) -> "TrackerSettings":
        refresh = refresh_seconds if refresh_seconds is not None else 1.0
        return cls(
            daily_limit=timedelta(minutes=limit_minutes),
            refresh_interval=timedelta(seconds=refresh),
        )
