"""Image analyzer port."""

from abc import ABC, abstractmethod
from typing import List

from domain.record.core.value_objects.analyzed_item import AnalyzedItem


class IImageAnalyzer(ABC):
    """Recognizes foods and their calories in a meal photo."""

    @abstractmethod
    async def analyze(self, image_data: str, mime_type: str) -> List[AnalyzedItem]:
        """Analyze a base64-encoded image.

        Args:
            image_data: Base64 (standard alphabet) image bytes
            mime_type: Image MIME type, e.g. ``image/jpeg``

        Returns:
            Recognized items; empty when no food is visible.

        Raises:
            Exception: Provider failures propagate unchanged
        """
        pass
