import pytest

from screen_time.config import TrackerSettings
from screen_time.controller import TrackerController
from screen_time.errors import AlreadyTrackingError, EmptyLogError, NotTrackingError
from screen_time.limits import LIMIT_WARNING

from conftest import HOUR, MINUTE


def _session(controller, clock, length):
    controller.start()
    clock.advance(length)
    result = controller.stop()
    clock.advance(5 * MINUTE)
    return result


def test_start_stop_reports_session_and_total(controller, clock):
    assert controller.start() == "Tracking started..."
    clock.advance(7_384_000)

    result = controller.stop()

    assert result.last_session == "Last session duration: 2 hours, 3 minutes"
    assert result.total_usage == "Total Usage: 2 hours, 3 minutes"
    assert result.entry.duration == 7_384_000
    assert len(controller.log) == 1


def test_double_start_leaves_log_unchanged(controller):
    controller.start()
    with pytest.raises(AlreadyTrackingError):
        controller.start()
    assert controller.log.is_empty()


def test_stop_without_session(controller):
    with pytest.raises(NotTrackingError):
        controller.stop()
    assert controller.log.is_empty()


def test_total_matches_sum_of_sessions(controller, clock):
    lengths = [3 * MINUTE, 41 * MINUTE, 1_500]
    for length in lengths:
        _session(controller, clock, length)
    assert controller.log.total_usage() == sum(lengths)


def test_limit_warning_after_third_session(controller, clock):
    first = _session(controller, clock, 45 * MINUTE)
    second = _session(controller, clock, 45 * MINUTE)
    third = _session(controller, clock, 45 * MINUTE)

    assert not first.limit_exceeded
    assert not second.limit_exceeded
    assert second.warning is None
    assert third.limit_exceeded
    assert third.warning == LIMIT_WARNING
    assert not controller.is_tracking


def test_custom_limit(clock):
    controller = TrackerController(
        settings=TrackerSettings.from_minutes(30), clock=clock
    )
    assert _session(controller, clock, 30 * MINUTE).limit_exceeded


def test_tick_reports_elapsed_without_side_effects(controller, clock):
    idle = controller.tick()
    assert not idle.tracking
    assert idle.elapsed == "Elapsed Time: 0 hours, 0 minutes"

    controller.start()
    clock.advance(HOUR + 2 * MINUTE)
    snapshot = controller.tick()

    assert snapshot.tracking
    assert snapshot.elapsed == "Elapsed Time: 1 hours, 2 minutes"
    assert snapshot.total_usage == "Total Usage: 0 hours, 0 minutes"
    assert snapshot.entry_count == 0
    assert controller.log.is_empty()


def test_view_and_export(controller, clock, tmp_path):
    with pytest.raises(EmptyLogError):
        controller.view()
    with pytest.raises(EmptyLogError):
        controller.export(tmp_path / "usage_log.csv")

    _session(controller, clock, 10 * MINUTE)

    assert controller.view().startswith("Usage Log:")
    written = controller.export(tmp_path / "usage_log.csv")
    assert written.read_text(encoding="utf-8").count("\n") == 2


def test_reset_clears_log_but_keeps_open_session(controller, clock):
    _session(controller, clock, 10 * MINUTE)
    controller.start()

    assert controller.reset() == "Usage log reset."

    assert controller.log.is_empty()
    assert controller.log.total_usage() == 0
    assert controller.is_tracking
    clock.advance(MINUTE)
    assert controller.stop().total_usage == "Total Usage: 0 hours, 1 minutes"


def test_controllers_are_independent(clock):
    first = TrackerController(clock=clock)
    second = TrackerController(clock=clock)
    first.start()
    second.start()
    clock.advance(MINUTE)
    first.stop()
    assert len(first.log) == 1
    assert second.log.is_empty()
    assert second.is_tracking
