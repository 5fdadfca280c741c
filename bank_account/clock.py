"""
Clock Providers

Accounts never read wall-clock time directly. They receive a Clock and ask
it for ``now()`` whenever a transaction is recorded, so tests and replays
control every timestamp.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Iterable, Iterator, Optional


class Clock(ABC):
    """Anything that can tell the current time"""

    @abstractmethod
    def now(self) -> datetime:
        """Get the current time (timezone-aware)"""
        ...


class SystemClock(Clock):
    """Production clock backed by the system time, always UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """
    Test clock with controlled time.

    ``now()`` returns the same value on repeated calls until ``advance()``,
    ``tick()`` or ``set_time()`` moves it.
    """

    def __init__(self, fixed_time: Optional[datetime] = None):
        self._fixed_time = fixed_time or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        self._advance_seconds = 0

    def now(self) -> datetime:
        return self._fixed_time + timedelta(seconds=self._advance_seconds)

    def set_time(self, time: datetime) -> None:
        """Set the clock to a specific time"""
        self._fixed_time = time
        self._advance_seconds = 0

    def advance(self, seconds: int = 1) -> None:
        """Advance the clock by the specified seconds"""
        self._advance_seconds += seconds

    def tick(self) -> datetime:
        """Advance by 1 second and return new time"""
        self.advance(1)
        return self.now()


class SequentialClock(Clock):
    """
    Clock that returns times from a predefined list, in order.

    Once the list is used up it keeps returning the last time.
    """

    def __init__(self, times: Iterable[datetime]):
        times = list(times)
        if not times:
            raise ValueError("SequentialClock requires at least one time")
        self._times: Iterator[datetime] = iter(times)
        self._last_time: Optional[datetime] = None

    def now(self) -> datetime:
        try:
            self._last_time = next(self._times)
        except StopIteration:
            pass
        return self._last_time
