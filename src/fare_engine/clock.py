"""Injectable sources of "now" for fare requests without a trip time."""

from datetime import UTC, datetime, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Reads the system clock in the given time zone."""

    def __init__(self, tz: tzinfo = UTC) -> None:
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Always returns the same instant. Used to pin time in tests and replays."""

    def __init__(self, instant: datetime) -> None:
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


def resolve_timezone(name: str) -> tzinfo:
    """Map a time zone name from configuration to a tzinfo."""
    if name.upper() == "UTC":
        return UTC
    return ZoneInfo(name)
