"""
Test suite for clock module

Tests the system clock and the deterministic clocks used by tests.
"""

import pytest
from datetime import datetime, timezone, timedelta

from bank_account.clock import Clock, FixedClock, SequentialClock, SystemClock


class TestSystemClock:

    def test_returns_aware_utc_time(self):
        before = datetime.now(timezone.utc)
        now = SystemClock().now()
        after = datetime.now(timezone.utc)

        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)
        assert before <= now <= after

    def test_clock_is_abstract(self):
        with pytest.raises(TypeError):
            Clock()


class TestFixedClock:
    """Test controllable clock"""

    def test_default_time(self):
        assert FixedClock().now() == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_returns_fixed_time_until_moved(self):
        fixed = datetime(2026, 2, 16, 12, 0, 0, tzinfo=timezone.utc)
        clock = FixedClock(fixed)

        assert clock.now() == fixed
        assert clock.now() == fixed

        clock.advance(30)
        assert clock.now() == fixed + timedelta(seconds=30)

        assert clock.tick() == fixed + timedelta(seconds=31)

    def test_set_time_resets_advance(self):
        clock = FixedClock()
        clock.advance(10)

        new_time = datetime(2030, 6, 1, tzinfo=timezone.utc)
        clock.set_time(new_time)
        assert clock.now() == new_time


class TestSequentialClock:
    """Test clock that replays a list of times"""

    def test_returns_times_in_order_then_repeats_last(self):
        times = [
            datetime(2026, 1, 1, tzinfo=timezone.utc),
            datetime(2026, 1, 2, tzinfo=timezone.utc),
        ]
        clock = SequentialClock(times)

        assert clock.now() == times[0]
        assert clock.now() == times[1]
        assert clock.now() == times[1]

    def test_requires_at_least_one_time(self):
        with pytest.raises(ValueError):
            SequentialClock([])

    def test_accepts_any_iterable(self):
        times = [datetime(2026, 1, 1, tzinfo=timezone.utc), datetime(2026, 1, 2, tzinfo=timezone.utc)]
        clock = SequentialClock(t for t in times)

        assert clock.now() == times[0]
        assert clock.now() == times[1]
        assert clock.now() == times[1]

    def test_rejects_empty_iterator(self):
        with pytest.raises(ValueError):
            SequentialClock(t for t in [])
        with pytest.raises(ValueError):
            SequentialClock(iter([]))
