"""In-memory implementation of IRecordRepository."""

from collections import defaultdict
from copy import deepcopy
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

from domain.record.core.entities.record import Record
from domain.record.core.ports.record_repository import IRecordRepository
from domain.record.core.value_objects.calories import Calories
from domain.record.core.value_objects.daily import DailyCalories
from domain.record.core.value_objects.statistics_period import StatisticsPeriod
from domain.shared.clock import Clock, end_of_day
from domain.shared.value_objects.identifiers import RecordId, UserId


class InMemoryRecordRepository(IRecordRepository):
    """
    In-memory implementation of record repository.

    Records are stored together with their items, as one aggregate.

    Example:
        >>> repository = InMemoryRecordRepository()
        >>> await repository.save(record)
        >>> await repository.find_by_id(record.id) == record
        True
    """

    def __init__(self) -> None:
        self._records: Dict[str, Record] = {}

    async def save(self, record: Record) -> None:
        self._records[str(record.id)] = deepcopy(record)

    async def find_by_id(self, record_id: RecordId) -> Optional[Record]:
        record = self._records.get(str(record_id))
        return deepcopy(record) if record else None

    async def find_by_user_id_and_date_range(
        self, user_id: UserId, start: datetime, end: datetime
    ) -> List[Record]:
        return [deepcopy(record) for record in self.records_in_range(user_id, start, end)]

    async def get_daily_calories(
        self, user_id: UserId, period: StatisticsPeriod, clock: Clock
    ) -> List[DailyCalories]:
        now = clock.now()
        end = end_of_day(now)
        start = end - timedelta(days=period.days())

        # Days are calendar days in the clock's timezone
        totals: Dict[date, Calories] = defaultdict(Calories.zero)
        for record in self.records_in_range(user_id, start, end):
            day = record.eaten_at.value.astimezone(now.tzinfo).date()
            totals[day] = totals[day].add(record.total_calories())

        return [DailyCalories(date=day, calories=totals[day]) for day in sorted(totals)]

    async def delete_by_id(self, record_id: RecordId) -> bool:
        return self._records.pop(str(record_id), None) is not None

    def records_in_range(self, user_id: UserId, start: datetime, end: datetime) -> List[Record]:
        """Stored records of a user with start <= eaten_at < end, oldest first."""
        matching = [
            record
            for record in self._records.values()
            if record.user_id == user_id and start <= record.eaten_at.value < end
        ]
        return sorted(matching, key=lambda record: record.eaten_at.value)

    def snapshot(self) -> Dict[str, Record]:
        return deepcopy(self._records)

    def restore(self, state: Dict[str, Record]) -> None:
        self._records = state

    def clear(self) -> None:
        """Clear all records (for testing)."""
        self._records.clear()
