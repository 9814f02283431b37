"""Ports for the advice domain."""

from .advice_cache_repository import IAdviceCacheRepository
from .advice_generator import IAdviceGenerator

__all__ = ["IAdviceCacheRepository", "IAdviceGenerator"]
