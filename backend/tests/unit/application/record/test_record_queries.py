"""Tests for today's records and statistics queries."""

from datetime import date, datetime, timezone

import pytest

from application.record.queries import (
    GetStatisticsQuery,
    GetStatisticsQueryHandler,
    GetTodayRecordsQuery,
    GetTodayRecordsQueryHandler,
)
from domain.record.core.value_objects import Calories, StatisticsPeriod
from domain.shared.clock import JST
from domain.shared.errors import InvalidStatisticsPeriodError, UserNotFoundError
from domain.shared.value_objects import UserId


def jst(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 6, day, hour, minute, tzinfo=JST)


class TestGetTodayRecords:
    @pytest.fixture
    def handler(self, user_repository, record_repository, clock):
        return GetTodayRecordsQueryHandler(user_repository, record_repository, clock=clock)

    @pytest.mark.asyncio
    async def test_today_summary(self, handler, saved_user, store_record):
        lunch = await store_record(saved_user.id, jst(15, 12), [("ramen", 650)])
        breakfast = await store_record(saved_user.id, jst(15, 8), [("rice", 250), ("miso soup", 40)])
        await store_record(saved_user.id, jst(14, 23, 59), [("beer", 200)])
        await store_record(UserId.generate(), jst(15, 9), [("toast", 300)])

        result = await handler.handle(GetTodayRecordsQuery(saved_user.id))

        assert result.date == jst(15, 0)
        assert result.records == [breakfast, lunch]
        assert result.total_calories == Calories(940)
        assert result.target_calories == Calories(2524)
        assert result.difference == 1584

    @pytest.mark.asyncio
    async def test_no_records(self, handler, saved_user):
        result = await handler.handle(GetTodayRecordsQuery(saved_user.id))

        assert result.records == []
        assert result.total_calories == Calories.zero()
        assert result.difference == 2524

    @pytest.mark.asyncio
    async def test_over_target_gives_negative_difference(self, handler, saved_user, store_record):
        await store_record(saved_user.id, jst(15, 11), [("feast", 3000)])

        result = await handler.handle(GetTodayRecordsQuery(saved_user.id))

        assert result.difference == -476

    @pytest.mark.asyncio
    async def test_user_not_found(self, handler):
        with pytest.raises(UserNotFoundError):
            await handler.handle(GetTodayRecordsQuery(UserId.generate()))


class TestGetStatistics:
    @pytest.fixture
    def handler(self, user_repository, record_repository, clock):
        return GetStatisticsQueryHandler(user_repository, record_repository, clock=clock)

    @pytest.mark.asyncio
    async def test_week(self, handler, saved_user, store_record):
        await self._store_history(saved_user, store_record)

        stats = await handler.handle(GetStatisticsQuery(saved_user.id, "week"))

        assert stats.period is StatisticsPeriod.WEEK
        assert stats.target_calories == Calories(2524)
        assert stats.total_days == 3
        assert stats.achieved_days == 1
        assert stats.over_days == 1
        # (2100 + 3000 + 500) // 3
        assert stats.average_calories == Calories(1866)
        assert [d.date for d in stats.daily_statistics] == [
            date(2025, 6, 12),
            date(2025, 6, 13),
            date(2025, 6, 14),
        ]
        assert [(d.is_achieved, d.is_over) for d in stats.daily_statistics] == [
            (False, False),
            (False, True),
            (True, False),
        ]
        assert all(d.target_calories == Calories(2524) for d in stats.daily_statistics)

    @pytest.mark.asyncio
    async def test_empty_period_defaults_to_week(self, handler, saved_user, store_record):
        await self._store_history(saved_user, store_record)

        stats = await handler.handle(GetStatisticsQuery(saved_user.id))

        assert stats.period is StatisticsPeriod.WEEK
        assert stats.total_days == 3

    @pytest.mark.asyncio
    async def test_month(self, handler, saved_user, store_record):
        await self._store_history(saved_user, store_record)

        stats = await handler.handle(GetStatisticsQuery(saved_user.id, "month"))

        assert stats.total_days == 4
        assert stats.average_calories == Calories(6600 // 4)
        assert stats.daily_statistics[0].date == date(2025, 6, 8)

    @pytest.mark.asyncio
    async def test_no_records(self, handler, saved_user):
        stats = await handler.handle(GetStatisticsQuery(saved_user.id))

        assert stats.total_days == 0
        assert stats.average_calories == Calories.zero()
        assert stats.daily_statistics == []

    @pytest.mark.asyncio
    async def test_invalid_period_checked_before_user(self, handler):
        with pytest.raises(InvalidStatisticsPeriodError):
            await handler.handle(GetStatisticsQuery(UserId.generate(), "year"))

    @pytest.mark.asyncio
    async def test_user_not_found(self, handler):
        with pytest.raises(UserNotFoundError):
            await handler.handle(GetStatisticsQuery(UserId.generate(), "week"))

    @staticmethod
    async def _store_history(saved_user, store_record):
        # achieved: 2100 is within 80%-100% of 2524
        await store_record(saved_user.id, jst(14, 8), [("rice", 1000)])
        await store_record(saved_user.id, jst(14, 19), [("curry", 1100)])
        # over
        await store_record(saved_user.id, jst(13, 12), [("feast", 3000)])
        # neither
        await store_record(saved_user.id, jst(12, 12), [("salad", 500)])
        # outside the week, inside the month
        await store_record(saved_user.id, jst(8, 12), [("ramen", 1000)])

    @pytest.mark.asyncio
    async def test_days_follow_clock_timezone(self, handler, saved_user, store_record):
        # 16:00 UTC on the 13th is 01:00 JST on the 14th
        await store_record(saved_user.id, datetime(2025, 6, 13, 16, 0, tzinfo=timezone.utc), [("snack", 200)])
        await store_record(saved_user.id, datetime(2025, 6, 13, 14, 0, tzinfo=timezone.utc), [("late snack", 100)])

        stats = await handler.handle(GetStatisticsQuery(saved_user.id))

        assert [(d.date, d.total_calories) for d in stats.daily_statistics] == [
            (date(2025, 6, 13), Calories(100)),
            (date(2025, 6, 14), Calories(200)),
        ]
