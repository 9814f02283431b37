"""Stub image analyzer for testing.

Returns a fixed food list without calling external APIs.
"""

from typing import List, Optional, Sequence, Tuple

from domain.record.core.ports.image_analyzer import IImageAnalyzer
from domain.record.core.value_objects.analyzed_item import AnalyzedItem

STUB_ANALYZED_ITEMS: List[AnalyzedItem] = [
    AnalyzedItem.create("rice", 250),
    AnalyzedItem.create("grilled salmon", 200),
    AnalyzedItem.create("miso soup", 40),
]


class StubImageAnalyzer(IImageAnalyzer):
    """
    Stub implementation of IImageAnalyzer.

    Records every (mime_type, image length) call so tests can inspect
    them. Pass ``items=[]`` to simulate a photo without food.
    """

    def __init__(self, items: Optional[Sequence[AnalyzedItem]] = None) -> None:
        self._items = list(STUB_ANALYZED_ITEMS if items is None else items)
        self.calls: List[Tuple[str, int]] = []

    async def analyze(self, image_data: str, mime_type: str) -> List[AnalyzedItem]:
        self.calls.append((mime_type, len(image_data)))
        return list(self._items)
