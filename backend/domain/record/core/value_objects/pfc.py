"""Pfc value object - protein / fat / carbohydrate grams."""

from dataclasses import dataclass

from domain.shared.errors import PfcMustNotBeNegativeError

# Share of total calories per macronutrient in the default target.
PROTEIN_RATIO = 0.15
FAT_RATIO = 0.25
CARBS_RATIO = 0.60

# Energy per gram.
PROTEIN_KCAL_PER_GRAM = 4.0
FAT_KCAL_PER_GRAM = 9.0
CARBS_KCAL_PER_GRAM = 4.0


@dataclass(frozen=True)
class Pfc:
    """Macronutrient amounts in grams.

    Used both for logged intake and for targets computed from a user.

    Attributes:
        protein: Protein in grams
        fat: Fat in grams
        carbs: Carbohydrates in grams
    """

    protein: float
    fat: float
    carbs: float

    @classmethod
    def create(cls, protein: float, fat: float, carbs: float) -> "Pfc":
        """Validate macronutrient grams.

        Raises:
            PfcMustNotBeNegativeError: If any amount is negative.
        """
        if protein < 0 or fat < 0 or carbs < 0:
            raise PfcMustNotBeNegativeError()
        return cls(float(protein), float(fat), float(carbs))

    @classmethod
    def reconstruct(cls, protein: float, fat: float, carbs: float) -> "Pfc":
        return cls(float(protein), float(fat), float(carbs))

    @classmethod
    def zero(cls) -> "Pfc":
        return cls(0.0, 0.0, 0.0)

    def add(self, other: "Pfc") -> "Pfc":
        return Pfc(
            self.protein + other.protein,
            self.fat + other.fat,
            self.carbs + other.carbs,
        )

    def __str__(self) -> str:
        return f"{self.protein:.1f}P / {self.fat:.1f}F / {self.carbs:.1f}C"
