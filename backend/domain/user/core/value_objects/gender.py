"""Gender value object."""

from enum import Enum

from domain.shared.errors import InvalidGenderError


class Gender(str, Enum):
    """Gender used to pick the BMR formula."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def create(cls, raw: str) -> "Gender":
        try:
            return cls(raw)
        except ValueError as e:
            raise InvalidGenderError() from e

    @classmethod
    def reconstruct(cls, raw: str) -> "Gender":
        return cls(raw)

    def __str__(self) -> str:
        return self.value
