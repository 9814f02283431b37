"""Get today's records query - what was eaten today vs the target."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

import structlog

from domain.record.core.entities.record import Record
from domain.record.core.ports.record_repository import IRecordRepository
from domain.record.core.value_objects.calories import Calories
from domain.shared.clock import Clock, SystemClock, end_of_day, start_of_day
from domain.shared.errors import UserNotFoundError
from domain.shared.value_objects.identifiers import UserId
from domain.user.core.ports.user_repository import IUserRepository

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class TodayRecords:
    """
    Today's calorie summary.

    Attributes:
        date: Midnight of today
        total_calories: Sum of today's records
        target_calories: User's daily target
        difference: target - total (positive: remaining, negative: over)
        records: Today's records, oldest first
    """

    date: datetime
    total_calories: Calories
    target_calories: Calories
    difference: int
    records: List[Record]


@dataclass(frozen=True)
class GetTodayRecordsQuery:
    user_id: UserId


class GetTodayRecordsQueryHandler:
    """Handler for GetTodayRecordsQuery."""

    def __init__(
        self,
        user_repository: IUserRepository,
        record_repository: IRecordRepository,
        clock: Optional[Clock] = None,
    ):
        self._user_repository = user_repository
        self._record_repository = record_repository
        self._clock = clock or SystemClock()

    async def handle(self, query: GetTodayRecordsQuery) -> TodayRecords:
        """
        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        user = await self._user_repository.find_by_id(query.user_id)
        if user is None:
            logger.warning(
                "user not found",
                operation="get_today_records",
                user_id=str(query.user_id),
            )
            raise UserNotFoundError()

        now = self._clock.now()
        start = start_of_day(now)

        records = await self._record_repository.find_by_user_id_and_date_range(
            query.user_id, start, end_of_day(now)
        )

        total = Calories.zero()
        for record in records:
            total = total.add(record.total_calories())

        target = user.calculate_target_calories(self._clock)

        return TodayRecords(
            date=start,
            total_calories=total,
            target_calories=target,
            difference=target.value - total.value,
            records=records,
        )
