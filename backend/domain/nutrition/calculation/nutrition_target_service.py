"""NutritionTargetService - daily targets for a user."""

from typing import TYPE_CHECKING, Optional

from domain.record.core.value_objects.calories import Calories
from domain.record.core.value_objects.pfc import Pfc
from domain.shared.clock import Clock

from ..core.ports.calculators import (
    IBMRCalculator,
    ICalorieTargetCalculator,
    IMacroCalculator,
)
from .bmr_service import BMRService
from .calorie_target_service import CalorieTargetService
from .macro_service import MacroService

if TYPE_CHECKING:
    from domain.user.core.entities.user import User


class NutritionTargetService:
    """Compose BMR, calorie and macro calculators for a ``User``.

    Pure and side-effect free; the clock is only read to compute age.
    """

    def __init__(
        self,
        bmr_calculator: Optional[IBMRCalculator] = None,
        calorie_calculator: Optional[ICalorieTargetCalculator] = None,
        macro_calculator: Optional[IMacroCalculator] = None,
    ):
        self._bmr_calculator = bmr_calculator or BMRService()
        self._calorie_calculator = calorie_calculator or CalorieTargetService()
        self._macro_calculator = macro_calculator or MacroService()

    def target_calories(self, user: "User", clock: Clock) -> Calories:
        profile = user.body_profile(clock)
        bmr = self._bmr_calculator.calculate(profile)
        return self._calorie_calculator.calculate(bmr, profile.activity_level)

    def target_pfc(self, user: "User", clock: Clock) -> Pfc:
        return self._macro_calculator.calculate(self.target_calories(user, clock))
