"""Height value object."""

from dataclasses import dataclass

from domain.shared.errors import HeightMustBePositiveError, HeightTooTallError

MAX_HEIGHT_CM = 300.0


@dataclass(frozen=True)
class Height:
    """Body height in centimeters (0 < cm <= 300)."""

    cm: float

    @classmethod
    def create(cls, cm: float) -> "Height":
        if cm <= 0:
            raise HeightMustBePositiveError()
        if cm > MAX_HEIGHT_CM:
            raise HeightTooTallError()
        return cls(float(cm))

    @classmethod
    def reconstruct(cls, cm: float) -> "Height":
        return cls(float(cm))

    def __str__(self) -> str:
        return f"{self.cm:.1f}cm"
