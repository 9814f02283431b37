"""AdviceCache entity - generated advice stored per user and day."""

from dataclasses import dataclass
from datetime import datetime

from domain.shared.clock import Clock, start_of_day
from domain.shared.value_objects.identifiers import AdviceCacheId, UserId


@dataclass
class AdviceCache:
    """Advice text generated for a user on one calendar day.

    ``cache_date`` is always midnight of the day it was derived from,
    in that timestamp's own timezone.

    Examples:
        >>> cache = AdviceCache.create(
        ...     user_id,
        ...     datetime(2025, 6, 15, 18, 42, tzinfo=JST),
        ...     "Eat more vegetables.",
        ...     clock=clock,
        ... )
        >>> cache.cache_date.isoformat()
        '2025-06-15T00:00:00+09:00'
    """

    id: AdviceCacheId
    user_id: UserId
    cache_date: datetime
    advice: str
    created_at: datetime

    @classmethod
    def create(
        cls, user_id: UserId, cache_date: datetime, advice: str, *, clock: Clock
    ) -> "AdviceCache":
        return cls(
            id=AdviceCacheId.generate(),
            user_id=user_id,
            cache_date=start_of_day(cache_date),
            advice=advice,
            created_at=clock.now(),
        )

    @classmethod
    def reconstruct(
        cls,
        id: str,
        user_id: str,
        cache_date: datetime,
        advice: str,
        created_at: datetime,
    ) -> "AdviceCache":
        return cls(
            id=AdviceCacheId.reconstruct(id),
            user_id=UserId.reconstruct(user_id),
            cache_date=cache_date,
            advice=advice,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdviceCache):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
