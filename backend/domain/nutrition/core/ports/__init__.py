"""Ports for the nutrition domain."""

from .calculators import IBMRCalculator, ICalorieTargetCalculator, IMacroCalculator

__all__ = ["IBMRCalculator", "ICalorieTargetCalculator", "IMacroCalculator"]
