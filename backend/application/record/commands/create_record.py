"""CreateRecordCommand - log a meal."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

import structlog

from domain.advice.core.ports.advice_cache_repository import IAdviceCacheRepository
from domain.record.core.entities.record import Record
from domain.record.core.entities.record_item import RecordItemInput
from domain.record.core.entities.record_pfc import RecordPfc
from domain.record.core.ports.pfc_estimator import IPfcEstimator
from domain.record.core.ports.record_pfc_repository import IRecordPfcRepository
from domain.record.core.ports.record_repository import IRecordRepository
from domain.shared.clock import Clock, SystemClock
from domain.shared.errors import DomainValidationError
from domain.shared.ports.transaction_manager import ITransactionManager
from domain.shared.value_objects.identifiers import UserId

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class CreateRecordCommand:
    """Command to log a meal.

    Attributes:
        user_id: Owner of the record
        eaten_at: When the meal was eaten (timezone-aware)
        items: Food name and calories per line
    """

    user_id: UserId
    eaten_at: datetime
    items: Tuple[RecordItemInput, ...]


@dataclass(frozen=True)
class CreateRecordResult:
    """Saved record and its PFC estimate (None when not estimated)."""

    record: Record
    record_pfc: Optional[RecordPfc] = None


class CreateRecordHandler:
    """Handler for CreateRecordCommand.

    Inside one transaction:
    1. Saves the record with its items
    2. Estimates and saves PFC (optional; failures only logged)
    3. Drops the cached advice of the record's day

    Example:
        >>> result = await handler.handle(
        ...     CreateRecordCommand(
        ...         user_id=user.id,
        ...         eaten_at=datetime(2025, 6, 15, 12, 30, tzinfo=JST),
        ...         items=(RecordItemInput("ramen", 650),),
        ...     )
        ... )
        >>> result.record.total_calories().value
        650
    """

    def __init__(
        self,
        record_repository: IRecordRepository,
        record_pfc_repository: IRecordPfcRepository,
        advice_cache_repository: IAdviceCacheRepository,
        transaction_manager: ITransactionManager,
        pfc_estimator: Optional[IPfcEstimator] = None,
        clock: Optional[Clock] = None,
    ):
        self._record_repository = record_repository
        self._record_pfc_repository = record_pfc_repository
        self._advice_cache_repository = advice_cache_repository
        self._transaction_manager = transaction_manager
        self._pfc_estimator = pfc_estimator
        self._clock = clock or SystemClock()

    async def handle(self, command: CreateRecordCommand) -> CreateRecordResult:
        """
        Raises:
            DomainValidationError: If eaten_at or any item is invalid
        """
        try:
            record = Record.create(
                command.user_id,
                command.eaten_at,
                command.items,
                clock=self._clock,
            )
        except DomainValidationError as e:
            logger.warning(
                "validation errors",
                operation="create_record",
                user_id=str(command.user_id),
                errors=e.messages,
            )
            raise

        async def work() -> CreateRecordResult:
            await self._record_repository.save(record)

            record_pfc = await self._estimate_pfc(record)
            if record_pfc is not None:
                await self._record_pfc_repository.save(record_pfc)

            # Cache days follow the clock timezone
            record_day = record.eaten_at.value.astimezone(self._clock.now().tzinfo)
            try:
                await self._advice_cache_repository.delete_by_user_id_and_date(
                    record.user_id, record_day
                )
            except Exception as e:
                logger.error(
                    "application error",
                    operation="create_record",
                    user_id=str(record.user_id),
                    error=str(e),
                    cache_delete_failed=True,
                )

            return CreateRecordResult(record=record, record_pfc=record_pfc)

        result = await self._transaction_manager.execute(work)
        logger.info(
            "record created",
            operation="create_record",
            record_id=str(record.id),
            item_count=len(record.items),
        )
        return result

    async def _estimate_pfc(self, record: Record) -> Optional[RecordPfc]:
        if self._pfc_estimator is None:
            return None

        try:
            pfc = await self._pfc_estimator.estimate(record.item_names())
            return RecordPfc.create(record.id, pfc.protein, pfc.fat, pfc.carbs)
        except Exception as e:
            logger.error(
                "application error",
                operation="create_record",
                record_id=str(record.id),
                error=str(e),
                pfc_estimation_failed=True,
            )
            return None
