"""In-memory implementation of IAdviceCacheRepository."""

from copy import deepcopy
from datetime import date, datetime
from typing import Dict, Optional, Tuple

from domain.advice.core.entities.advice_cache import AdviceCache
from domain.advice.core.ports.advice_cache_repository import IAdviceCacheRepository
from domain.shared.value_objects.identifiers import UserId

CacheKey = Tuple[str, date]


def _key(user_id: UserId, moment: datetime) -> CacheKey:
    # Calendar day in the moment's own timezone
    return str(user_id), moment.date()


class InMemoryAdviceCacheRepository(IAdviceCacheRepository):
    """In-memory implementation of advice cache repository."""

    def __init__(self) -> None:
        self._caches: Dict[CacheKey, AdviceCache] = {}

    async def save(self, cache: AdviceCache) -> None:
        self._caches[_key(cache.user_id, cache.cache_date)] = deepcopy(cache)

    async def find_by_user_id_and_date(
        self, user_id: UserId, cache_date: datetime
    ) -> Optional[AdviceCache]:
        cache = self._caches.get(_key(user_id, cache_date))
        return deepcopy(cache) if cache else None

    async def delete_by_user_id_and_date(self, user_id: UserId, cache_date: datetime) -> bool:
        return self._caches.pop(_key(user_id, cache_date), None) is not None

    def snapshot(self) -> Dict[CacheKey, AdviceCache]:
        return deepcopy(self._caches)

    def restore(self, state: Dict[CacheKey, AdviceCache]) -> None:
        self._caches = state

    def clear(self) -> None:
        """Clear all cached advice (for testing)."""
        self._caches.clear()
