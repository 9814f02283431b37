"""RecordItem entity - one food line of a record."""

from dataclasses import dataclass

from domain.record.core.value_objects.calories import Calories
from domain.record.core.value_objects.item_name import ItemName
from domain.shared.validation import ValidationErrors
from domain.shared.value_objects.identifiers import RecordId, RecordItemId


@dataclass(frozen=True)
class RecordItemInput:
    """Raw item data as entered by the user."""

    name: str
    calories: int


@dataclass
class RecordItem:
    """Single food item belonging to a ``Record``.

    Attributes:
        id: Item identifier
        record_id: Parent record
        name: Food name
        calories: Energy of the item (>= 1 kcal)
    """

    id: RecordItemId
    record_id: RecordId
    name: ItemName
    calories: Calories

    @classmethod
    def create(cls, record_id: RecordId, name: str, calories: int) -> "RecordItem":
        """Validate name and calories together.

        Raises:
            DomainValidationError: With the name and/or calories error.
        """
        errors = ValidationErrors()

        name_vo = errors.capture(ItemName.create, name)
        calories_vo = errors.capture(Calories.create, calories)

        errors.raise_if_any()

        return cls(
            id=RecordItemId.generate(),
            record_id=record_id,
            name=name_vo,
            calories=calories_vo,
        )

    @classmethod
    def reconstruct(cls, id: str, record_id: str, name: str, calories: int) -> "RecordItem":
        return cls(
            id=RecordItemId.reconstruct(id),
            record_id=RecordId.reconstruct(record_id),
            name=ItemName.reconstruct(name),
            calories=Calories.reconstruct(calories),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordItem):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
