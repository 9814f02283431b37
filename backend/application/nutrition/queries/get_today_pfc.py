"""Get today's PFC query - macronutrients eaten today vs the target."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import structlog

from domain.record.core.ports.record_pfc_repository import IRecordPfcRepository
from domain.record.core.value_objects.pfc import Pfc
from domain.shared.clock import Clock, SystemClock, end_of_day, start_of_day
from domain.shared.errors import UserNotFoundError
from domain.shared.value_objects.identifiers import UserId
from domain.user.core.ports.user_repository import IUserRepository

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class TodayPfc:
    date: datetime
    current_pfc: Pfc
    target_pfc: Pfc


@dataclass(frozen=True)
class GetTodayPfcQuery:
    user_id: UserId


class GetTodayPfcQueryHandler:
    """Handler for GetTodayPfcQuery."""

    def __init__(
        self,
        user_repository: IUserRepository,
        record_pfc_repository: IRecordPfcRepository,
        clock: Optional[Clock] = None,
    ):
        self._user_repository = user_repository
        self._record_pfc_repository = record_pfc_repository
        self._clock = clock or SystemClock()

    async def handle(self, query: GetTodayPfcQuery) -> TodayPfc:
        """
        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        user = await self._user_repository.find_by_id(query.user_id)
        if user is None:
            logger.warning("user not found", operation="get_today_pfc", user_id=str(query.user_id))
            raise UserNotFoundError()

        now = self._clock.now()
        start = start_of_day(now)

        daily = await self._record_pfc_repository.get_daily_pfc(query.user_id, start, end_of_day(now))

        return TodayPfc(
            date=start,
            current_pfc=daily.pfc,
            target_pfc=user.calculate_target_pfc(self._clock),
        )
