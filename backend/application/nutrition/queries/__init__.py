"""Queries for nutrition targets and advice."""

from .get_advice import GetAdviceQuery, GetAdviceQueryHandler, NutritionAdvice
from .get_today_pfc import GetTodayPfcQuery, GetTodayPfcQueryHandler, TodayPfc

__all__ = [
    "GetAdviceQuery",
    "GetAdviceQueryHandler",
    "GetTodayPfcQuery",
    "GetTodayPfcQueryHandler",
    "NutritionAdvice",
    "TodayPfc",
]
