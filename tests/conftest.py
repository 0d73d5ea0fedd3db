"""Shared pytest fixtures for screen time tests."""

from __future__ import annotations

import pytest

from screen_time.config import TrackerSettings
from screen_time.controller import TrackerController

MINUTE = 60_000
HOUR = 60 * MINUTE
DAY = 24 * HOUR

# 2024-03-05 00:00:00 UTC
DAY_START = 1_709_596_800_000


class FakeClock:
    """Manually advanced epoch-millisecond clock."""

    def __init__(self, now: int = DAY_START + 9 * HOUR) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def controller(clock: FakeClock) -> TrackerController:
    return TrackerController(settings=TrackerSettings(), clock=clock)
