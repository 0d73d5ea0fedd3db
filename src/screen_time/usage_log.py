"""In-memory log of tracked intervals."""

from __future__ import annotations

from typing import Iterator

from .models import UsageEntry

MILLIS_PER_DAY = 86_400_000


def day_bucket(instant: int) -> int:
    """Return the fixed-size (UTC-aligned) day index of an instant."""
    return instant // MILLIS_PER_DAY


class UsageLog:
    """Append-only sequence of usage entries, cleared only as a whole."""

    def __init__(self) -> None:
        self._entries: list[UsageEntry] = []
        self._total = 0

    def append(self, entry: UsageEntry) -> None:
        self._entries.append(entry)
        self._total += entry.duration

    def total_usage(self) -> int:
        return self._total

    def today_usage(self, now: int) -> int:
        """Sum the durations of entries that started in the same day as ``now``."""
        today = day_bucket(now)
        return sum(
            entry.duration for entry in self._entries if day_bucket(entry.start) == today
        )

    def clear(self) -> None:
        self._entries.clear()
        self._total = 0

    def is_empty(self) -> bool:
        return not self._entries

    def entries(self) -> tuple[UsageEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[UsageEntry]:
        return iter(self.entries())
