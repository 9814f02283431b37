"""Analyze image query - recognize foods and calories in a meal photo."""

from dataclasses import dataclass
from typing import List

import structlog

from domain.record.core.ports.image_analyzer import IImageAnalyzer
from domain.record.core.value_objects.analyzed_item import AnalyzedItem
from domain.shared.errors import (
    DomainError,
    ImageAnalysisFailedError,
    ImageDataRequiredError,
    MimeTypeRequiredError,
    NoFoodDetectedError,
)

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class ImageAnalysis:
    items: List[AnalyzedItem]


@dataclass(frozen=True)
class AnalyzeImageQuery:
    """
    Query: analyze a meal photo.

    Attributes:
        image_data: Base64-encoded image bytes
        mime_type: Image MIME type (e.g. "image/jpeg")
    """

    image_data: str
    mime_type: str


class AnalyzeImageQueryHandler:
    """Handler for AnalyzeImageQuery.

    Nothing is stored; the result only pre-fills a new record.
    """

    def __init__(self, image_analyzer: IImageAnalyzer):
        self._image_analyzer = image_analyzer

    async def handle(self, query: AnalyzeImageQuery) -> ImageAnalysis:
        """
        Raises:
            ImageDataRequiredError: If image_data is empty
            MimeTypeRequiredError: If mime_type is empty
            ImageAnalysisFailedError: If the analyzer fails
            NoFoodDetectedError: If no food was recognized
        """
        if not query.image_data:
            raise ImageDataRequiredError()
        if not query.mime_type:
            raise MimeTypeRequiredError()

        try:
            items = await self._image_analyzer.analyze(query.image_data, query.mime_type)
        except DomainError:
            raise
        except Exception as e:
            logger.error(
                "application error",
                operation="analyze_image",
                mime_type=query.mime_type,
                error=str(e),
            )
            raise ImageAnalysisFailedError() from e

        if not items:
            logger.warning("no food detected", operation="analyze_image", mime_type=query.mime_type)
            raise NoFoodDetectedError()

        logger.info("image analyzed", operation="analyze_image", item_count=len(items))
        return ImageAnalysis(items=list(items))
