"""Tests for analyze image query."""

from unittest.mock import AsyncMock

import pytest

from application.record.queries.analyze_image import AnalyzeImageQuery, AnalyzeImageQueryHandler
from domain.record.core.value_objects import AnalyzedItem
from domain.shared.errors import (
    ImageAnalysisError,
    ImageAnalysisFailedError,
    ImageDataRequiredError,
    MimeTypeRequiredError,
    NoFoodDetectedError,
)
from infrastructure.ai.providers import StubImageAnalyzer
from infrastructure.ai.providers.stub_image_analyzer import STUB_ANALYZED_ITEMS

IMAGE_B64 = "aGVsbG8="


class TestAnalyzeImage:
    @pytest.mark.asyncio
    async def test_returns_analyzed_items(self):
        analyzer = StubImageAnalyzer(
            items=[AnalyzedItem.create("hamburger", 500), AnalyzedItem.create("fries", 300)]
        )

        result = await AnalyzeImageQueryHandler(analyzer).handle(
            AnalyzeImageQuery(IMAGE_B64, "image/jpeg")
        )

        assert [(item.name.value, item.calories.value) for item in result.items] == [
            ("hamburger", 500),
            ("fries", 300),
        ]
        assert analyzer.calls == [("image/jpeg", len(IMAGE_B64))]

    @pytest.mark.asyncio
    async def test_stub_analyzer_default_items(self):
        result = await AnalyzeImageQueryHandler(StubImageAnalyzer()).handle(
            AnalyzeImageQuery(IMAGE_B64, "image/png")
        )

        assert result.items == STUB_ANALYZED_ITEMS

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "image_data, mime_type, error",
        [
            ("", "image/jpeg", ImageDataRequiredError),
            (IMAGE_B64, "", MimeTypeRequiredError),
            ("", "", ImageDataRequiredError),
        ],
    )
    async def test_required_inputs(self, image_data, mime_type, error):
        analyzer = AsyncMock()

        with pytest.raises(error):
            await AnalyzeImageQueryHandler(analyzer).handle(AnalyzeImageQuery(image_data, mime_type))

        analyzer.analyze.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_food_detected(self):
        with pytest.raises(NoFoodDetectedError):
            await AnalyzeImageQueryHandler(StubImageAnalyzer(items=[])).handle(
                AnalyzeImageQuery(IMAGE_B64, "image/jpeg")
            )

    @pytest.mark.asyncio
    async def test_analyzer_failure_is_wrapped(self):
        analyzer = AsyncMock()
        analyzer.analyze.side_effect = RuntimeError("upstream down")

        with pytest.raises(ImageAnalysisFailedError) as exc_info:
            await AnalyzeImageQueryHandler(analyzer).handle(
                AnalyzeImageQuery(IMAGE_B64, "image/jpeg")
            )

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert isinstance(exc_info.value, ImageAnalysisError)

    @pytest.mark.asyncio
    async def test_domain_errors_from_analyzer_propagate(self):
        analyzer = AsyncMock()
        analyzer.analyze.side_effect = NoFoodDetectedError()

        with pytest.raises(NoFoodDetectedError):
            await AnalyzeImageQueryHandler(analyzer).handle(
                AnalyzeImageQuery(IMAGE_B64, "image/jpeg")
            )
