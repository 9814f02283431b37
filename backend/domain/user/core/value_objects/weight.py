"""Weight value object."""

from dataclasses import dataclass

from domain.shared.errors import WeightMustBePositiveError, WeightTooHeavyError

MAX_WEIGHT_KG = 500.0


@dataclass(frozen=True)
class Weight:
    """Body weight in kilograms (0 < kg <= 500).

    Examples:
        >>> Weight.create(70.5).kg
        70.5
        >>> Weight.create(0)
        Traceback (most recent call last):
        ...
        WeightMustBePositiveError: weight must be positive
    """

    kg: float

    @classmethod
    def create(cls, kg: float) -> "Weight":
        if kg <= 0:
            raise WeightMustBePositiveError()
        if kg > MAX_WEIGHT_KG:
            raise WeightTooHeavyError()
        return cls(float(kg))

    @classmethod
    def reconstruct(cls, kg: float) -> "Weight":
        return cls(float(kg))

    def __str__(self) -> str:
        return f"{self.kg:.1f}kg"
