"""Per-day read models returned by repository aggregations."""

from dataclasses import dataclass
from datetime import date

from .calories import Calories
from .pfc import Pfc


@dataclass(frozen=True)
class DailyCalories:
    """Calories eaten on one calendar day."""

    date: date
    calories: Calories


@dataclass(frozen=True)
class DailyPfc:
    """Macronutrients eaten on one calendar day."""

    date: date
    pfc: Pfc
