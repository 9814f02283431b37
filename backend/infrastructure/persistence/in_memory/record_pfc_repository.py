"""In-memory implementation of IRecordPfcRepository."""

from copy import deepcopy
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from domain.record.core.entities.record_pfc import RecordPfc
from domain.record.core.ports.record_pfc_repository import IRecordPfcRepository
from domain.record.core.value_objects.daily import DailyPfc
from domain.record.core.value_objects.pfc import Pfc
from domain.shared.value_objects.identifiers import RecordId, UserId

from .record_repository import InMemoryRecordRepository


class InMemoryRecordPfcRepository(IRecordPfcRepository):
    """
    In-memory implementation of record PFC repository.

    Keyed by record id (one estimate per record). Daily sums look up
    the owning records in the given record repository.
    """

    def __init__(self, record_repository: InMemoryRecordRepository) -> None:
        self._record_repository = record_repository
        self._record_pfcs: Dict[str, RecordPfc] = {}

    async def save(self, record_pfc: RecordPfc) -> None:
        self._record_pfcs[str(record_pfc.record_id)] = deepcopy(record_pfc)

    async def find_by_record_id(self, record_id: RecordId) -> Optional[RecordPfc]:
        record_pfc = self._record_pfcs.get(str(record_id))
        return deepcopy(record_pfc) if record_pfc else None

    async def find_by_record_ids(self, record_ids: Sequence[RecordId]) -> List[RecordPfc]:
        return [
            deepcopy(self._record_pfcs[str(record_id)])
            for record_id in record_ids
            if str(record_id) in self._record_pfcs
        ]

    async def get_daily_pfc(self, user_id: UserId, start: datetime, end: datetime) -> DailyPfc:
        total = Pfc.zero()
        for record in self._record_repository.records_in_range(user_id, start, end):
            record_pfc = self._record_pfcs.get(str(record.id))
            if record_pfc is not None:
                total = total.add(record_pfc.pfc)
        return DailyPfc(date=start.date(), pfc=total)

    def snapshot(self) -> Dict[str, RecordPfc]:
        return deepcopy(self._record_pfcs)

    def restore(self, state: Dict[str, RecordPfc]) -> None:
        self._record_pfcs = state

    def clear(self) -> None:
        """Clear all estimates (for testing)."""
        self._record_pfcs.clear()
