"""Command handling shared by the console and web front ends."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import TrackerSettings
from .errors import ExportError
from .export import render_log, write_csv
from .formatting import format_duration
from .limits import LIMIT_WARNING, limit_exceeded
from .models import UsageEntry
from .tracker import Clock, SessionTracker, current_millis
from .usage_log import UsageLog

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StopResult:
    entry: UsageEntry
    last_session: str
    total_usage: str
    limit_exceeded: bool

    @property
    def warning(self) -> Optional[str]:
        return LIMIT_WARNING if self.limit_exceeded else None


@dataclass(frozen=True, slots=True)
class TrackerStatus:
    tracking: bool
    elapsed: str
    total_usage: str
    today_usage: str
    limit_exceeded: bool
    entry_count: int


class TrackerController:
    """Owns one tracking session, its usage log and the daily limit.

    Front ends call the command methods and render the strings they return.
    Precondition failures surface as ``ScreenTimeError`` subclasses.
    """

    def __init__(
        self,
        settings: Optional[TrackerSettings] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.settings = settings or TrackerSettings()
        self._clock = clock or current_millis
        self._tracker = SessionTracker(clock=self._clock)
        self._log = UsageLog()
        self._lock = threading.Lock()

    @property
    def log(self) -> UsageLog:
        return self._log

    @property
    def is_tracking(self) -> bool:
        return self._tracker.is_tracking

    def start(self) -> str:
        with self._lock:
            self._tracker.start()
        logger.info("Tracking started.")
        return "Tracking started..."

    def stop(self) -> StopResult:
        with self._lock:
            entry = self._tracker.stop()
            self._log.append(entry)
            exceeded = limit_exceeded(
                self._log, self._clock(), self.settings.daily_limit_ms
            )
            total = self._log.total_usage()
        logger.info("Tracking stopped after %s.", format_duration(entry.duration))
        if exceeded:
            logger.warning(
                "Daily limit of %s reached.",
                format_duration(self.settings.daily_limit_ms),
            )
        return StopResult(
            entry=entry,
            last_session=f"Last session duration: {format_duration(entry.duration)}",
            total_usage=f"Total Usage: {format_duration(total)}",
            limit_exceeded=exceeded,
        )

    def tick(self) -> TrackerStatus:
        """Snapshot for periodic display refresh; changes nothing."""
        with self._lock:
            now = self._clock()
            elapsed = self._tracker.elapsed_since_start(now)
            return TrackerStatus(
                tracking=self._tracker.is_tracking,
                elapsed=f"Elapsed Time: {format_duration(elapsed)}",
                total_usage=f"Total Usage: {format_duration(self._log.total_usage())}",
                today_usage=f"Today: {format_duration(self._log.today_usage(now))}",
                limit_exceeded=limit_exceeded(
                    self._log, now, self.settings.daily_limit_ms
                ),
                entry_count=len(self._log),
            )

    def view(self) -> str:
        with self._lock:
            return render_log(self._log)

    def export(self, path: Path) -> Path:
        with self._lock:
            try:
                written = write_csv(self._log, path)
            except ExportError:
                logger.exception("Failed to export usage log to %s", path)
                raise
        logger.info("Usage log exported to %s", written)
        return written

    def reset(self) -> str:
        with self._lock:
            self._log.clear()
        logger.info("Usage log reset.")
        return "Usage log reset."
