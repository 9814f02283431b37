"""Record entity - aggregate root for a logged meal."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Sequence

from domain.record.core.entities.record_item import RecordItem, RecordItemInput
from domain.record.core.value_objects.calories import Calories
from domain.record.core.value_objects.eaten_at import EatenAt
from domain.shared.clock import Clock
from domain.shared.errors import DomainValidationError, RecordItemsRequiredError
from domain.shared.validation import ValidationErrors
from domain.shared.value_objects.identifiers import RecordId, UserId


@dataclass
class Record:
    """Record aggregate root.

    One eating occasion: when it happened and what was eaten.

    Invariants:
    - at least one item
    - eaten_at is not after the clock's now at creation time
    - every item belongs to this record

    Examples:
        >>> clock = FixedClock(datetime(2025, 6, 15, 12, 0, tzinfo=JST))
        >>> record = Record.create(
        ...     user_id,
        ...     datetime(2025, 6, 15, 8, 0, tzinfo=JST),
        ...     [RecordItemInput("rice", 250), RecordItemInput("miso soup", 40)],
        ...     clock=clock,
        ... )
        >>> record.total_calories().value
        290
        >>> record.item_names()
        ['rice', 'miso soup']
    """

    id: RecordId
    user_id: UserId
    eaten_at: EatenAt
    created_at: datetime
    items: List[RecordItem] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        user_id: UserId,
        eaten_at: datetime,
        items: Sequence[RecordItemInput],
        *,
        clock: Clock,
    ) -> "Record":
        """Factory method to log a new meal.

        With no items only ``RecordItemsRequiredError`` is reported.
        Otherwise the eaten_at error comes first, followed by each
        item's errors in item order.

        Raises:
            DomainValidationError: Carrying every collected error.
        """
        if not items:
            raise DomainValidationError([RecordItemsRequiredError()])

        record_id = RecordId.generate()
        errors = ValidationErrors()

        eaten_at_vo = errors.capture(EatenAt.create, eaten_at, clock)
        record_items = [
            errors.capture(RecordItem.create, record_id, item.name, item.calories)
            for item in items
        ]

        errors.raise_if_any()

        return cls(
            id=record_id,
            user_id=user_id,
            eaten_at=eaten_at_vo,
            created_at=clock.now(),
            items=record_items,
        )

    @classmethod
    def reconstruct(
        cls,
        id: str,
        user_id: str,
        eaten_at: datetime,
        created_at: datetime,
        items: Sequence[RecordItem],
    ) -> "Record":
        """Rebuild a record from trusted storage without validation."""
        return cls(
            id=RecordId.reconstruct(id),
            user_id=UserId.reconstruct(user_id),
            eaten_at=EatenAt.reconstruct(eaten_at),
            created_at=created_at,
            items=list(items),
        )

    def add_item(self, name: str, calories: int) -> RecordItem:
        """Validate and append one item.

        Raises:
            DomainValidationError: With the item's errors; the record
                is left unchanged.
        """
        item = RecordItem.create(self.id, name, calories)
        self.items.append(item)
        return item

    def total_calories(self) -> Calories:
        total = Calories.zero()
        for item in self.items:
            total = total.add(item.calories)
        return total

    def item_names(self) -> List[str]:
        return [item.name.value for item in self.items]

    def __eq__(self, other: object) -> bool:
        """Equality based on id (aggregate identity)."""
        if not isinstance(other, Record):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
