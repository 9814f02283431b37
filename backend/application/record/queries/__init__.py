"""Queries for the record context."""

from .analyze_image import AnalyzeImageQuery, AnalyzeImageQueryHandler, ImageAnalysis
from .get_statistics import (
    DailyStatistics,
    GetStatisticsQuery,
    GetStatisticsQueryHandler,
    Statistics,
)
from .get_today_records import (
    GetTodayRecordsQuery,
    GetTodayRecordsQueryHandler,
    TodayRecords,
)

__all__ = [
    "AnalyzeImageQuery",
    "AnalyzeImageQueryHandler",
    "DailyStatistics",
    "GetStatisticsQuery",
    "GetStatisticsQueryHandler",
    "GetTodayRecordsQuery",
    "GetTodayRecordsQueryHandler",
    "ImageAnalysis",
    "Statistics",
    "TodayRecords",
]
