"""BMRService - Basal Metabolic Rate calculation."""

from domain.user.core.value_objects.gender import Gender

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.body_profile import BodyProfile

MALE_ADJUSTMENT = 5.0
FEMALE_ADJUSTMENT = -161.0


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161
        Other: mean of the two

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, profile: BodyProfile) -> BMR:
        """Calculate BMR from user biometric data.

        Args:
            profile: User biometric data (weight, height, age, gender)

        Returns:
            BMR: Calculated basal metabolic rate in kcal/day

        Example:
            >>> service = BMRService()
            >>> profile = BodyProfile(
            ...     weight_kg=70.0,
            ...     height_cm=175.0,
            ...     age=34,
            ...     gender=Gender.MALE,
            ...     activity_level=ActivityLevel.MODERATE,
            ... )
            >>> service.calculate(profile).value
            1628.75
        """
        # Base calculation (common for every gender)
        base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age

        if profile.gender is Gender.MALE:
            bmr_value = base + MALE_ADJUSTMENT
        elif profile.gender is Gender.FEMALE:
            bmr_value = base + FEMALE_ADJUSTMENT
        else:
            bmr_value = ((base + MALE_ADJUSTMENT) + (base + FEMALE_ADJUSTMENT)) / 2

        return BMR(value=bmr_value)
