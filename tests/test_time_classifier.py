from datetime import datetime

import pytest

from fare_engine.policy import DEFAULT_PEAK_WINDOWS, HourWindow, PeakWindow
from fare_engine.time_classifier import is_night_time, is_peak_hour


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 1, 15, hour, minute)


@pytest.mark.unit
class TestIsPeakHour:
    @pytest.mark.parametrize(
        "timestamp, expected",
        [
            (at(7, 0), True),
            (at(6, 59), False),
            (at(9, 59), True),
            (at(10, 0), False),
            (at(17, 0), True),
            (at(19, 30), True),
            (at(20, 0), False),
            (at(12, 0), False),
        ],
    )
    def test_default_windows(self, timestamp, expected):
        assert is_peak_hour(timestamp, DEFAULT_PEAK_WINDOWS) is expected

    def test_no_windows_never_peak(self):
        assert is_peak_hour(at(8), ()) is False

    def test_custom_disjoint_windows(self):
        windows = (PeakWindow(start_hour=0, end_hour=1), PeakWindow(start_hour=13, end_hour=14))

        assert is_peak_hour(at(0, 30), windows)
        assert is_peak_hour(at(13, 15), windows)
        assert not is_peak_hour(at(1, 0), windows)
        assert not is_peak_hour(at(14, 0), windows)


@pytest.mark.unit
class TestIsNightTime:
    @pytest.mark.parametrize(
        "timestamp, expected",
        [
            (at(23, 0), True),
            (at(22, 0), True),
            (at(21, 59), False),
            (at(0, 0), True),
            (at(5, 59), True),
            (at(6, 0), False),
            (at(12, 0), False),
        ],
    )
    def test_default_window(self, timestamp, expected):
        assert is_night_time(timestamp) is expected

    def test_custom_window(self):
        window = HourWindow(start_hour=20, end_hour=4)

        assert is_night_time(at(20), window)
        assert not is_night_time(at(4), window)

    def test_pure_function_of_input(self):
        timestamp = at(23, 30)
        assert is_night_time(timestamp) == is_night_time(timestamp)
