"""Get advice query - AI dietary advice for today, cached per day."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import structlog

from domain.advice.core.entities.advice_cache import AdviceCache
from domain.advice.core.ports.advice_cache_repository import IAdviceCacheRepository
from domain.advice.core.ports.advice_generator import IAdviceGenerator
from domain.record.core.entities.record import Record
from domain.record.core.ports.record_pfc_repository import IRecordPfcRepository
from domain.record.core.ports.record_repository import IRecordRepository
from domain.record.core.value_objects.calories import Calories
from domain.record.core.value_objects.pfc import Pfc
from domain.shared.clock import Clock, SystemClock, end_of_day, start_of_day
from domain.shared.errors import UserNotFoundError
from domain.shared.value_objects.identifiers import UserId
from domain.user.core.ports.user_repository import IUserRepository

logger = structlog.get_logger(__name__, layer="application")

NO_RECORD_ADVICE_MESSAGE = "No meals recorded today yet. Log a meal to receive advice!"

NUTRITION_ADVICE_PROMPT = """You are a nutrition advisor. Give short advice based on the information below.

[Time of day]
{time_context}

[Targets]
- Calories: {target_calories} kcal
- PFC: protein {target_protein:.1f}g / fat {target_fat:.1f}g / carbs {target_carbs:.1f}g

[Intake so far]
- Calories: {current_calories} kcal
- PFC: protein {current_protein:.1f}g / fat {current_fat:.1f}g / carbs {current_carbs:.1f}g

[Eaten today]
{food_items}
Answer in the following form:
- 3 to 5 short lines
- Evaluate progress against the targets
- Point out missing or excessive nutrients
- Suggest what to focus on at the next meal"""


@dataclass(frozen=True)
class NutritionAdvice:
    """
    Advice for today.

    Attributes:
        advice: Advice text
        cached: True when served from the advice cache
    """

    advice: str
    cached: bool = False


@dataclass(frozen=True)
class GetAdviceQuery:
    user_id: UserId


def format_food_items(items: Sequence[str]) -> str:
    """Numbered list, one item per line."""
    if not items:
        return "(no meals recorded yet)\n"
    return "".join(f"{i}. {item}\n" for i, item in enumerate(items, start=1))


def build_nutrition_advice_prompt(
    time_context: str,
    target_calories: Calories,
    target_pfc: Pfc,
    current_calories: Calories,
    current_pfc: Pfc,
    food_items: Sequence[str],
) -> str:
    """Render the advice prompt sent to the generator.

    Example:
        >>> prompt = build_nutrition_advice_prompt(
        ...     "midday (lunch time)",
        ...     Calories.reconstruct(2524),
        ...     Pfc.reconstruct(94.65, 70.11, 378.6),
        ...     Calories.reconstruct(650),
        ...     Pfc.reconstruct(25.0, 20.0, 90.0),
        ...     ["ramen"],
        ... )
        >>> "- Calories: 2524 kcal" in prompt
        True
    """
    return NUTRITION_ADVICE_PROMPT.format(
        time_context=time_context,
        target_calories=target_calories.value,
        target_protein=target_pfc.protein,
        target_fat=target_pfc.fat,
        target_carbs=target_pfc.carbs,
        current_calories=current_calories.value,
        current_protein=current_pfc.protein,
        current_fat=current_pfc.fat,
        current_carbs=current_pfc.carbs,
        food_items=format_food_items(food_items),
    )


def latest_record(records: Sequence[Record]) -> Record:
    """Most recently eaten record (first one wins on ties)."""
    latest = records[0]
    for record in records[1:]:
        if record.eaten_at.value > latest.eaten_at.value:
            latest = record
    return latest


class GetAdviceQueryHandler:
    """Handler for GetAdviceQuery.

    Flow:
    1. No records today -> fixed message (generator not called)
    2. Cached advice for today -> reuse it
    3. Otherwise build the prompt, generate, cache (cache failures
       are only logged)
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        record_repository: IRecordRepository,
        record_pfc_repository: IRecordPfcRepository,
        advice_cache_repository: IAdviceCacheRepository,
        advice_generator: IAdviceGenerator,
        clock: Optional[Clock] = None,
    ):
        self._user_repository = user_repository
        self._record_repository = record_repository
        self._record_pfc_repository = record_pfc_repository
        self._advice_cache_repository = advice_cache_repository
        self._advice_generator = advice_generator
        self._clock = clock or SystemClock()

    async def handle(self, query: GetAdviceQuery) -> NutritionAdvice:
        """
        Raises:
            UserNotFoundError: If the user doesn't exist
            Exception: Advice generator failures propagate
        """
        user = await self._user_repository.find_by_id(query.user_id)
        if user is None:
            logger.warning("user not found", operation="get_advice", user_id=str(query.user_id))
            raise UserNotFoundError()

        now = self._clock.now()
        records = await self._record_repository.find_by_user_id_and_date_range(
            query.user_id, start_of_day(now), end_of_day(now)
        )
        if not records:
            return NutritionAdvice(advice=NO_RECORD_ADVICE_MESSAGE)

        cached = await self._advice_cache_repository.find_by_user_id_and_date(query.user_id, now)
        if cached is not None:
            return NutritionAdvice(advice=cached.advice, cached=True)

        record_pfcs = await self._record_pfc_repository.find_by_record_ids(
            [record.id for record in records]
        )

        current_calories = Calories.zero()
        food_items: List[str] = []
        for record in records:
            current_calories = current_calories.add(record.total_calories())
            food_items.extend(record.item_names())

        current_pfc = Pfc.zero()
        for record_pfc in record_pfcs:
            current_pfc = current_pfc.add(record_pfc.pfc)

        prompt = build_nutrition_advice_prompt(
            time_context=latest_record(records).eaten_at.time_context(),
            target_calories=user.calculate_target_calories(self._clock),
            target_pfc=user.calculate_target_pfc(self._clock),
            current_calories=current_calories,
            current_pfc=current_pfc,
            food_items=food_items,
        )

        advice = await self._advice_generator.generate_advice(prompt)

        cache = AdviceCache.create(query.user_id, now, advice, clock=self._clock)
        try:
            await self._advice_cache_repository.save(cache)
        except Exception as e:
            logger.error(
                "application error",
                operation="get_advice",
                user_id=str(query.user_id),
                error=str(e),
                cache_save_failed=True,
            )

        return NutritionAdvice(advice=advice)
