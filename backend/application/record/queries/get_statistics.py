"""Get statistics query - calorie history over a week or a month."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

import structlog

from domain.record.core.ports.record_repository import IRecordRepository
from domain.record.core.value_objects.calories import Calories
from domain.record.core.value_objects.statistics_period import StatisticsPeriod
from domain.shared.clock import Clock, SystemClock
from domain.shared.errors import UserNotFoundError
from domain.shared.value_objects.identifiers import UserId
from domain.user.core.ports.user_repository import IUserRepository

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class DailyStatistics:
    """One day of the statistics chart."""

    date: date
    total_calories: Calories
    target_calories: Calories
    is_achieved: bool
    is_over: bool


@dataclass(frozen=True)
class Statistics:
    """
    Calorie statistics for a period.

    Only days with at least one record are counted.

    Attributes:
        period: week or month
        target_calories: Daily target
        average_calories: Mean over counted days (integer division)
        total_days: Number of counted days
        achieved_days: Days within 80%-100% of target
        over_days: Days above target
        daily_statistics: Per-day breakdown, oldest first
    """

    period: StatisticsPeriod
    target_calories: Calories
    average_calories: Calories
    total_days: int
    achieved_days: int
    over_days: int
    daily_statistics: List[DailyStatistics]


@dataclass(frozen=True)
class GetStatisticsQuery:
    """
    Query: calorie statistics.

    Attributes:
        user_id: User to report on
        period: "week", "month", or "" (week)
    """

    user_id: UserId
    period: str = ""


class GetStatisticsQueryHandler:
    """Handler for GetStatisticsQuery."""

    def __init__(
        self,
        user_repository: IUserRepository,
        record_repository: IRecordRepository,
        clock: Optional[Clock] = None,
    ):
        self._user_repository = user_repository
        self._record_repository = record_repository
        self._clock = clock or SystemClock()

    async def handle(self, query: GetStatisticsQuery) -> Statistics:
        """
        Raises:
            InvalidStatisticsPeriodError: If period is not week/month
            UserNotFoundError: If the user doesn't exist
        """
        period = StatisticsPeriod.create(query.period)

        user = await self._user_repository.find_by_id(query.user_id)
        if user is None:
            logger.warning(
                "user not found",
                operation="get_statistics",
                user_id=str(query.user_id),
            )
            raise UserNotFoundError()

        target = user.calculate_target_calories(self._clock)

        daily_calories = await self._record_repository.get_daily_calories(
            query.user_id, period, self._clock
        )

        achieved_days = 0
        over_days = 0
        total = Calories.zero()
        daily_statistics: List[DailyStatistics] = []

        for daily in daily_calories:
            is_achieved = daily.calories.is_achieved(target)
            is_over = daily.calories.is_over(target)
            if is_achieved:
                achieved_days += 1
            if is_over:
                over_days += 1
            total = total.add(daily.calories)

            daily_statistics.append(
                DailyStatistics(
                    date=daily.date,
                    total_calories=daily.calories,
                    target_calories=target,
                    is_achieved=is_achieved,
                    is_over=is_over,
                )
            )

        total_days = len(daily_calories)
        average = Calories.zero()
        if total_days > 0:
            average = Calories.reconstruct(total.value // total_days)

        return Statistics(
            period=period,
            target_calories=target,
            average_calories=average,
            total_days=total_days,
            achieved_days=achieved_days,
            over_days=over_days,
            daily_statistics=daily_statistics,
        )
