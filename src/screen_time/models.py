"""Domain models for recorded screen time."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .formatting import to_datetime


@dataclass(frozen=True, slots=True)
class UsageEntry:
    """One tracked interval, in epoch milliseconds."""

    start: int
    end: int
    duration: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) precedes start ({self.start})")
        if self.duration != self.end - self.start:
            raise ValueError(
                f"duration {self.duration} does not match span {self.end - self.start}"
            )

    @classmethod
    def from_span(cls, start: int, end: int) -> "UsageEntry":
        return cls(start=start, end=end, duration=end - start)

    @property
    def start_time(self) -> datetime:
        return to_datetime(self.start)

    @property
    def end_time(self) -> datetime:
        return to_datetime(self.end)
