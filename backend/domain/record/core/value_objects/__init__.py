"""Value objects for the record domain."""

from .analyzed_item import AnalyzedItem
from .calories import Calories
from .daily import DailyCalories, DailyPfc
from .eaten_at import EatenAt
from .item_name import ItemName
from .pfc import Pfc
from .statistics_period import StatisticsPeriod

__all__ = [
    "AnalyzedItem",
    "Calories",
    "DailyCalories",
    "DailyPfc",
    "EatenAt",
    "ItemName",
    "Pfc",
    "StatisticsPeriod",
]
