"""Manual start/stop session tracking."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import AlreadyTrackingError, NotTrackingError
from .models import UsageEntry

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def current_millis() -> int:
    """Wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(slots=True)
class TrackingSession:
    active: bool = False
    start_time: Optional[int] = None


class SessionTracker:
    """Two-state machine (idle / tracking) around a single open session."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock = clock or current_millis
        self._session = TrackingSession()

    @property
    def is_tracking(self) -> bool:
        return self._session.active

    @property
    def start_time(self) -> Optional[int]:
        return self._session.start_time if self._session.active else None

    def start(self) -> int:
        if self._session.active:
            raise AlreadyTrackingError()
        started = self._clock()
        self._session = TrackingSession(active=True, start_time=started)
        logger.debug("Session opened at %d", started)
        return started

    def stop(self) -> UsageEntry:
        session = self._session
        if not session.active or session.start_time is None:
            raise NotTrackingError()
        stopped = self._clock()
        if stopped < session.start_time:
            logger.warning(
                "Clock moved backwards by %d ms during session; recording zero length.",
                session.start_time - stopped,
            )
            stopped = session.start_time
        entry = UsageEntry.from_span(session.start_time, stopped)
        self._session = TrackingSession()
        logger.debug("Session closed after %d ms", entry.duration)
        return entry

    def elapsed_since_start(self, now: Optional[int] = None) -> int:
        """Milliseconds since the open session started, or 0 when idle."""
        if not self._session.active or self._session.start_time is None:
            return 0
        current = self._clock() if now is None else now
        return max(current - self._session.start_time, 0)
