"""BodyProfile value object - inputs of the calorie target formulas."""

from dataclasses import dataclass

from domain.user.core.value_objects.activity_level import ActivityLevel
from domain.user.core.value_objects.gender import Gender


@dataclass(frozen=True)
class BodyProfile:
    """User biometric and activity data for target calculation.

    Built from an already validated ``User`` (see
    ``User.body_profile``), so it carries no validation of its own.

    Attributes:
        weight_kg: Body weight in kilograms
        height_cm: Height in centimeters
        age: Completed years of age
        gender: Gender selecting the BMR formula
        activity_level: Physical activity level
    """

    weight_kg: float
    height_cm: float
    age: int
    gender: Gender
    activity_level: ActivityLevel

