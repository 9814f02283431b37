"""Ports for the record domain."""

from .image_analyzer import IImageAnalyzer
from .pfc_estimator import IPfcEstimator
from .record_pfc_repository import IRecordPfcRepository
from .record_repository import IRecordRepository

__all__ = ["IImageAnalyzer", "IPfcEstimator", "IRecordPfcRepository", "IRecordRepository"]
