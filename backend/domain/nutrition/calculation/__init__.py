"""Calculation services for nutrition targets."""

from .bmr_service import BMRService
from .calorie_target_service import CalorieTargetService
from .macro_service import MacroService
from .nutrition_target_service import NutritionTargetService

__all__ = [
    "BMRService",
    "CalorieTargetService",
    "MacroService",
    "NutritionTargetService",
]
