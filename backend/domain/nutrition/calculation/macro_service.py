"""MacroService - macronutrient target calculation."""

from domain.record.core.value_objects.calories import Calories
from domain.record.core.value_objects.pfc import (
    CARBS_KCAL_PER_GRAM,
    CARBS_RATIO,
    FAT_KCAL_PER_GRAM,
    FAT_RATIO,
    PROTEIN_KCAL_PER_GRAM,
    PROTEIN_RATIO,
    Pfc,
)

from ..core.ports.calculators import IMacroCalculator


class MacroService(IMacroCalculator):
    """Distribute a calorie target into protein, fat and carbohydrates.

    Fixed split of total calories:
        - Protein: 15%
        - Fat: 25%
        - Carbs: 60%

    Calorie conversion:
        - Protein: 4 kcal/g
        - Fat: 9 kcal/g
        - Carbohydrates: 4 kcal/g

    Each macro is computed independently:
        grams = target × ratio / kcal_per_gram
    """

    def calculate(self, calories_target: Calories) -> Pfc:
        """Calculate macro grams.

        Example:
            >>> split = MacroService().calculate(Calories.reconstruct(2000))
            >>> split.protein, split.fat, split.carbs
            (75.0, 55.55555555555556, 300.0)
        """
        target = float(calories_target.value)
        return Pfc.reconstruct(
            protein=target * PROTEIN_RATIO / PROTEIN_KCAL_PER_GRAM,
            fat=target * FAT_RATIO / FAT_KCAL_PER_GRAM,
            carbs=target * CARBS_RATIO / CARBS_KCAL_PER_GRAM,
        )
