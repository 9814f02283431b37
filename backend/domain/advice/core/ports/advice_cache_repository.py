"""AdviceCache repository port."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from domain.advice.core.entities.advice_cache import AdviceCache
from domain.shared.value_objects.identifiers import UserId


class IAdviceCacheRepository(ABC):
    """Repository interface for cached advice, keyed by (user, day)."""

    @abstractmethod
    async def save(self, cache: AdviceCache) -> None:
        """Store advice, replacing any entry for the same user and day."""
        pass

    @abstractmethod
    async def find_by_user_id_and_date(
        self, user_id: UserId, cache_date: datetime
    ) -> Optional[AdviceCache]:
        """Find the advice for ``cache_date``'s calendar day."""
        pass

    @abstractmethod
    async def delete_by_user_id_and_date(self, user_id: UserId, cache_date: datetime) -> bool:
        pass
