"""Time-of-day classification for surge pricing.

Both checks look only at the hour of the timestamp they are given. Callers
convert timestamps into the deployment's canonical time zone first; nothing
here reads a clock.
"""

from collections.abc import Iterable
from datetime import datetime

from fare_engine.policy import DEFAULT_NIGHT_WINDOW, HourWindow


def is_peak_hour(timestamp: datetime, windows: Iterable[HourWindow]) -> bool:
    """True if the timestamp's hour falls in any of the peak windows."""
    hour = timestamp.hour
    return any(window.contains(hour) for window in windows)


def is_night_time(timestamp: datetime, window: HourWindow = DEFAULT_NIGHT_WINDOW) -> bool:
    """True if the timestamp's hour falls in the night window (22:00-06:00 by default)."""
    return window.contains(timestamp.hour)
