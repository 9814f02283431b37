"""ItemName value object."""

from dataclasses import dataclass

from domain.shared.errors import ItemNameRequiredError


@dataclass(frozen=True)
class ItemName:
    """Name of a logged food item."""

    value: str

    @classmethod
    def create(cls, raw: str) -> "ItemName":
        if not raw:
            raise ItemNameRequiredError()
        return cls(raw)

    @classmethod
    def reconstruct(cls, raw: str) -> "ItemName":
        return cls(raw)

    def __str__(self) -> str:
        return self.value
