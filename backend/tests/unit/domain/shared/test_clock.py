"""Unit tests for clocks and day helpers."""

from datetime import datetime, timezone

import pytest
from freezegun import freeze_time

from domain.shared.clock import JST, FixedClock, SystemClock, end_of_day, start_of_day


class TestSystemClock:
    @freeze_time("2025-01-01 00:30:00")
    def test_now_in_jst(self):
        now = SystemClock().now()

        # 00:30 UTC is 09:30 in Tokyo
        assert now.hour == 9
        assert now.minute == 30
        assert now.utcoffset() == JST.utcoffset(None)

    @freeze_time("2025-01-01 00:30:00")
    def test_now_in_custom_timezone(self):
        assert SystemClock(tz=timezone.utc).now().hour == 0


class TestFixedClock:
    def test_returns_instant(self):
        instant = datetime(2025, 6, 15, 12, 0, tzinfo=JST)

        assert FixedClock(instant).now() == instant

    def test_advanced(self):
        clock = FixedClock(datetime(2025, 6, 15, 12, 0, tzinfo=JST))

        assert clock.advanced(days=1, seconds=1).now() == datetime(
            2025, 6, 16, 12, 0, 1, tzinfo=JST
        )
        # original unchanged
        assert clock.now().day == 15

    def test_rejects_naive_instant(self):
        with pytest.raises(ValueError):
            FixedClock(datetime(2025, 6, 15, 12, 0))


class TestDayHelpers:
    def test_start_of_day(self):
        moment = datetime(2025, 6, 15, 18, 42, 7, 123, tzinfo=JST)

        assert start_of_day(moment) == datetime(2025, 6, 15, tzinfo=JST)

    def test_end_of_day_is_next_midnight(self):
        moment = datetime(2025, 6, 30, 23, 59, tzinfo=JST)

        assert end_of_day(moment) == datetime(2025, 7, 1, tzinfo=JST)
