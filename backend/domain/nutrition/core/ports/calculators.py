"""Calculator ports - interfaces for BMR/calorie/macro calculations."""

from abc import ABC, abstractmethod

from domain.record.core.value_objects.calories import Calories
from domain.record.core.value_objects.pfc import Pfc
from domain.user.core.value_objects.activity_level import ActivityLevel

from ..value_objects.bmr import BMR
from ..value_objects.body_profile import BodyProfile


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(self, profile: BodyProfile) -> BMR:
        """Calculate BMR from body data.

        Args:
            profile: User biometric data

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ICalorieTargetCalculator(ABC):
    """Port for daily calorie target calculation."""

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> Calories:
        """Calculate the daily calorie target.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            Calories: Daily target in whole kcal
        """
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient target calculation."""

    @abstractmethod
    def calculate(self, calories_target: Calories) -> Pfc:
        """Split a calorie target into macronutrient grams.

        Args:
            calories_target: Daily calorie target

        Returns:
            Pfc: Protein/fat/carbs in grams
        """
        pass
