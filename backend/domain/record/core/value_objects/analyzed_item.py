"""AnalyzedItem value object - one food recognized in a meal photo."""

from dataclasses import dataclass

from domain.record.core.value_objects.calories import Calories
from domain.record.core.value_objects.item_name import ItemName


@dataclass(frozen=True)
class AnalyzedItem:
    """Food name and estimated calories read from an image.

    Not persisted; the client turns accepted items into
    ``RecordItemInput`` values for a new record.

    Example:
        >>> AnalyzedItem.create("hamburger", 500)
        AnalyzedItem(name=ItemName(value='hamburger'), calories=Calories(value=500))
    """

    name: ItemName
    calories: Calories

    @classmethod
    def create(cls, name: str, calories: int) -> "AnalyzedItem":
        """
        Raises:
            ItemNameRequiredError: If ``name`` is empty.
            CaloriesMustBePositiveError: If ``calories`` is less than 1.
        """
        return cls(ItemName.create(name), Calories.create(calories))
