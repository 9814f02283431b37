"""Calories value object.

Integer kilocalories with the achievement rules used by statistics.
"""

from dataclasses import dataclass

from domain.shared.errors import CaloriesMustBePositiveError

# Lower bound of the "achieved" band, as a fraction of the target.
ACHIEVEMENT_LOWER_RATIO = (8, 10)


@dataclass(frozen=True, order=True)
class Calories:
    """Energy amount in kcal.

    ``create`` accepts only values >= 1 (a logged item always has
    energy). ``reconstruct`` and ``zero`` allow 0 for sums and targets
    read back from storage.

    Examples:
        >>> Calories.create(80).is_achieved(Calories.create(100))
        True
        >>> Calories.create(101).is_over(Calories.create(100))
        True
        >>> Calories.zero().add(Calories.create(250)).value
        250
    """

    value: int

    @classmethod
    def create(cls, raw: int) -> "Calories":
        """Validate a logged calorie amount.

        Raises:
            CaloriesMustBePositiveError: If ``raw`` is less than 1.
        """
        if raw < 1:
            raise CaloriesMustBePositiveError()
        return cls(raw)

    @classmethod
    def reconstruct(cls, raw: int) -> "Calories":
        return cls(raw)

    @classmethod
    def zero(cls) -> "Calories":
        return cls(0)

    def add(self, other: "Calories") -> "Calories":
        return Calories(self.value + other.value)

    def is_achieved(self, target: "Calories") -> bool:
        """True when 80% <= self / target <= 100%.

        A zero target is never achieved.
        """
        if target.value == 0:
            return False
        numerator, denominator = ACHIEVEMENT_LOWER_RATIO
        return self.value * denominator >= target.value * numerator and self.value <= target.value

    def is_over(self, target: "Calories") -> bool:
        """True when self / target > 100%.

        Against a zero target any positive intake is over, zero is not.
        """
        if target.value == 0:
            return self.value > 0
        return self.value > target.value

    def __str__(self) -> str:
        return f"{self.value}kcal"
