"""Time sources for helpers that read the current time."""

from datetime import datetime, timedelta
from typing import Optional, Protocol


class TimeSource(Protocol):
    """Anything that can tell the current local time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Reads the system clock in local time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Always returns the same moment; useful for tests and replays."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def advance(self, **delta) -> None:
        self.moment = self.moment + timedelta(**delta)


SYSTEM_CLOCK = SystemClock()


def resolve_clock(clock: Optional[TimeSource] = None) -> TimeSource:
    return clock if clock is not None else SYSTEM_CLOCK
