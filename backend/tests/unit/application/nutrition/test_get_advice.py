"""Tests for advice query."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from application.nutrition.queries import GetAdviceQuery, GetAdviceQueryHandler
from application.nutrition.queries.get_advice import (
    NO_RECORD_ADVICE_MESSAGE,
    build_nutrition_advice_prompt,
    format_food_items,
)
from domain.advice.core.entities.advice_cache import AdviceCache
from domain.record.core.entities import RecordPfc
from domain.record.core.value_objects import Calories, Pfc
from domain.shared.clock import JST
from domain.shared.errors import UserNotFoundError
from domain.shared.value_objects import UserId
from infrastructure.ai.providers.stub_advice_generator import STUB_ADVICE


@pytest.fixture
def make_handler(
    user_repository,
    record_repository,
    record_pfc_repository,
    advice_cache_repository,
    advice_generator,
    clock,
):
    def _make(**overrides):
        dependencies = {
            "user_repository": user_repository,
            "record_repository": record_repository,
            "record_pfc_repository": record_pfc_repository,
            "advice_cache_repository": advice_cache_repository,
            "advice_generator": advice_generator,
            "clock": clock,
        }
        dependencies.update(overrides)
        return GetAdviceQueryHandler(**dependencies)

    return _make


@pytest.fixture
def todays_meals(saved_user, store_record, record_pfc_repository):
    async def _store():
        breakfast = await store_record(
            saved_user.id,
            datetime(2025, 6, 15, 8, 0, tzinfo=JST),
            [("rice", 250), ("miso soup", 40)],
        )
        await store_record(saved_user.id, datetime(2025, 6, 15, 11, 30, tzinfo=JST), [("ramen", 650)])
        await record_pfc_repository.save(RecordPfc.create(breakfast.id, 6.0, 1.7, 58.4))

    return _store


class TestGetAdvice:
    @pytest.mark.asyncio
    async def test_no_records_returns_fixed_message(self, make_handler, saved_user, advice_generator):
        result = await make_handler().handle(GetAdviceQuery(saved_user.id))

        assert result.advice == NO_RECORD_ADVICE_MESSAGE
        assert result.cached is False
        assert advice_generator.prompts == []

    @pytest.mark.asyncio
    async def test_generates_and_caches(
        self, make_handler, saved_user, todays_meals, advice_generator, advice_cache_repository, clock
    ):
        await todays_meals()

        result = await make_handler().handle(GetAdviceQuery(saved_user.id))

        assert result.advice == STUB_ADVICE
        assert result.cached is False
        [prompt] = advice_generator.prompts
        assert "midday (lunch time)" in prompt
        assert "- Calories: 2524 kcal" in prompt
        assert "- Calories: 940 kcal" in prompt
        assert "protein 6.0g / fat 1.7g / carbs 58.4g" in prompt
        assert "1. rice\n2. miso soup\n3. ramen\n" in prompt

        cache = await advice_cache_repository.find_by_user_id_and_date(saved_user.id, clock.now())
        assert cache.advice == STUB_ADVICE
        assert cache.cache_date == datetime(2025, 6, 15, tzinfo=JST)

    @pytest.mark.asyncio
    async def test_second_call_is_served_from_cache(
        self, make_handler, saved_user, todays_meals, advice_generator
    ):
        await todays_meals()
        handler = make_handler()

        await handler.handle(GetAdviceQuery(saved_user.id))
        result = await handler.handle(GetAdviceQuery(saved_user.id))

        assert result.cached is True
        assert result.advice == STUB_ADVICE
        assert len(advice_generator.prompts) == 1

    @pytest.mark.asyncio
    async def test_existing_cache_is_used(
        self, make_handler, saved_user, todays_meals, advice_cache_repository, advice_generator, clock
    ):
        await todays_meals()
        await advice_cache_repository.save(
            AdviceCache.create(saved_user.id, clock.now(), "cached advice", clock=clock)
        )

        result = await make_handler().handle(GetAdviceQuery(saved_user.id))

        assert result.advice == "cached advice"
        assert result.cached is True
        assert advice_generator.prompts == []

    @pytest.mark.asyncio
    async def test_cache_save_failure_still_returns_advice(self, make_handler, saved_user, todays_meals):
        await todays_meals()
        advice_cache_repository = AsyncMock()
        advice_cache_repository.find_by_user_id_and_date.return_value = None
        advice_cache_repository.save.side_effect = RuntimeError("cache down")

        result = await make_handler(advice_cache_repository=advice_cache_repository).handle(
            GetAdviceQuery(saved_user.id)
        )

        assert result.advice == STUB_ADVICE
        advice_cache_repository.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_generator_failure_propagates(
        self, make_handler, saved_user, todays_meals, advice_cache_repository, clock
    ):
        await todays_meals()
        generator = AsyncMock()
        generator.generate_advice.side_effect = RuntimeError("rate limited")

        with pytest.raises(RuntimeError, match="rate limited"):
            await make_handler(advice_generator=generator).handle(GetAdviceQuery(saved_user.id))

        assert await advice_cache_repository.find_by_user_id_and_date(saved_user.id, clock.now()) is None

    @pytest.mark.asyncio
    async def test_user_not_found(self, make_handler):
        with pytest.raises(UserNotFoundError):
            await make_handler().handle(GetAdviceQuery(UserId.generate()))


class TestPromptHelpers:
    def test_format_food_items(self):
        assert format_food_items(["rice", "natto"]) == "1. rice\n2. natto\n"

    def test_format_no_food_items(self):
        assert format_food_items([]) == "(no meals recorded yet)\n"

    def test_build_prompt(self):
        prompt = build_nutrition_advice_prompt(
            "evening (dinner time)",
            Calories(2000),
            Pfc(75.0, 55.555, 300.0),
            Calories(1200),
            Pfc(40.0, 30.0, 150.0),
            ["salmon"],
        )

        assert prompt.startswith("You are a nutrition advisor.")
        assert "evening (dinner time)" in prompt
        assert "protein 75.0g / fat 55.6g / carbs 300.0g" in prompt
        assert "1. salmon\n" in prompt
