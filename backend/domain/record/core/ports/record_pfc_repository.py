"""RecordPfc repository port."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from domain.record.core.entities.record_pfc import RecordPfc
from domain.record.core.value_objects.daily import DailyPfc
from domain.shared.value_objects.identifiers import RecordId, UserId


class IRecordPfcRepository(ABC):
    """Repository interface for RecordPfc (one per record)."""

    @abstractmethod
    async def save(self, record_pfc: RecordPfc) -> None:
        pass

    @abstractmethod
    async def find_by_record_id(self, record_id: RecordId) -> Optional[RecordPfc]:
        pass

    @abstractmethod
    async def find_by_record_ids(self, record_ids: Sequence[RecordId]) -> List[RecordPfc]:
        """Batch lookup; records without an estimate are skipped."""
        pass

    @abstractmethod
    async def get_daily_pfc(self, user_id: UserId, start: datetime, end: datetime) -> DailyPfc:
        """Sum the PFC of a user's records eaten in ``[start, end)``.

        Returns:
            Totals dated on ``start``'s day; zero when nothing matched
        """
        pass
