from datetime import datetime

import pytest

from screen_time.formatting import format_duration, format_timestamp


@pytest.mark.parametrize(
    ("millis", "expected"),
    [
        (0, "0 hours, 0 minutes"),
        (59_999, "0 hours, 0 minutes"),
        (60_000, "0 hours, 1 minutes"),
        (3_599_999, "0 hours, 59 minutes"),
        (7_384_000, "2 hours, 3 minutes"),
        (90_000_000, "25 hours, 0 minutes"),
    ],
)
def test_format_duration_truncates(millis, expected):
    assert format_duration(millis) == expected


def test_format_duration_negative_truncates_toward_zero():
    assert format_duration(-90_000) == "0 hours, -1 minutes"
    assert format_duration(-3_660_000) == "-1 hours, -1 minutes"


def test_format_timestamp_uses_local_time():
    instant = int(datetime(2024, 3, 5, 14, 7, 9).timestamp() * 1000)
    assert format_timestamp(instant) == "2024-03-05 14:07:09"
