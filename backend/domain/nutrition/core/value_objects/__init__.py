"""Value objects for the nutrition domain."""

from .bmr import BMR
from .body_profile import BodyProfile

__all__ = ["BMR", "BodyProfile"]
