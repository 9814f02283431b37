"""ActivityLevel value object - physical activity level for calorie targets."""

from enum import Enum

from domain.shared.errors import InvalidActivityLevelError


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) used to scale BMR.

    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "veryActive"

    @classmethod
    def create(cls, raw: str) -> "ActivityLevel":
        """Parse a raw activity level.

        Raises:
            InvalidActivityLevelError: If ``raw`` is not a known level.
        """
        try:
            return cls(raw)
        except ValueError as e:
            raise InvalidActivityLevelError() from e

    @classmethod
    def reconstruct(cls, raw: str) -> "ActivityLevel":
        return cls(raw)

    def multiplier(self) -> float:
        """Get PAL multiplier.

        Returns:
            float: Multiplier applied to BMR

        Example:
            >>> ActivityLevel.MODERATE.multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHT: 1.375,
            ActivityLevel.MODERATE: 1.55,
            ActivityLevel.ACTIVE: 1.725,
            ActivityLevel.VERY_ACTIVE: 1.9,
        }
        return multipliers[self]

    def description(self) -> str:
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise",
            ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
            ActivityLevel.ACTIVE: "Hard exercise 6-7 days/week",
            ActivityLevel.VERY_ACTIVE: "Very hard exercise + physical job",
        }
        return descriptions[self]

    def __str__(self) -> str:
        return self.value
