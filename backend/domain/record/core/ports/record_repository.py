"""Record repository port."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from domain.record.core.entities.record import Record
from domain.record.core.value_objects.daily import DailyCalories
from domain.record.core.value_objects.statistics_period import StatisticsPeriod
from domain.shared.clock import Clock
from domain.shared.value_objects.identifiers import RecordId, UserId


class IRecordRepository(ABC):
    """Repository interface for Record aggregate (record + its items)."""

    @abstractmethod
    async def save(self, record: Record) -> None:
        """Persist a record together with all of its items."""
        pass

    @abstractmethod
    async def find_by_id(self, record_id: RecordId) -> Optional[Record]:
        pass

    @abstractmethod
    async def find_by_user_id_and_date_range(
        self, user_id: UserId, start: datetime, end: datetime
    ) -> List[Record]:
        """Find a user's records with ``start <= eaten_at < end``.

        Returns:
            Records ordered by eaten_at ascending
        """
        pass

    @abstractmethod
    async def get_daily_calories(
        self, user_id: UserId, period: StatisticsPeriod, clock: Clock
    ) -> List[DailyCalories]:
        """Sum calories per calendar day over the period ending today.

        The window covers ``period.days()`` days including today. Days
        without records are omitted.

        Returns:
            One entry per day with records, ordered by date ascending
        """
        pass

    @abstractmethod
    async def delete_by_id(self, record_id: RecordId) -> bool:
        pass
