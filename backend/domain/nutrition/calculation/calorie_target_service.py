"""CalorieTargetService - daily calorie target from BMR and activity."""

import math

from domain.record.core.value_objects.calories import Calories
from domain.user.core.value_objects.activity_level import ActivityLevel

from ..core.ports.calculators import ICalorieTargetCalculator
from ..core.value_objects.bmr import BMR


class CalorieTargetService(ICalorieTargetCalculator):
    """Calculate the daily calorie target.

    Formula:
        target = floor(BMR × PAL)

    PAL Multipliers:
        - Sedentary: 1.2
        - Light: 1.375
        - Moderate: 1.55
        - Active: 1.725
        - Very Active: 1.9
    """

    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> Calories:
        """Calculate target calories.

        Example:
            >>> CalorieTargetService().calculate(
            ...     BMR(value=1628.75), ActivityLevel.MODERATE
            ... ).value
            2524
        """
        return Calories.reconstruct(math.floor(bmr.value * activity_level.multiplier()))
