"""EatenAt value object.

Timezone-aware moment a meal was eaten. Meal logging is historical,
so a new value can never be after the clock's current instant.
"""

from dataclasses import dataclass
from datetime import date, datetime

from domain.shared.clock import Clock
from domain.shared.errors import EatenAtMustNotBeFutureError


@dataclass(frozen=True)
class EatenAt:
    """When a record's food was eaten.

    Examples:
        >>> clock = FixedClock(datetime(2025, 6, 15, 12, 0, tzinfo=JST))
        >>> EatenAt.create(datetime(2025, 6, 15, 8, 30, tzinfo=JST), clock).time_context()
        'morning (breakfast time)'
        >>> EatenAt.create(datetime(2025, 6, 15, 12, 1, tzinfo=JST), clock)
        Traceback (most recent call last):
        ...
        EatenAtMustNotBeFutureError: eaten at must not be in the future
    """

    value: datetime

    @classmethod
    def create(cls, raw: datetime, clock: Clock) -> "EatenAt":
        """Validate a meal timestamp against ``clock``.

        Raises:
            ValueError: If ``raw`` is a naive datetime.
            EatenAtMustNotBeFutureError: If ``raw`` is after now.
        """
        if raw.tzinfo is None:
            raise ValueError("eaten_at must be timezone-aware")
        if raw > clock.now():
            raise EatenAtMustNotBeFutureError()
        return cls(raw)

    @classmethod
    def reconstruct(cls, raw: datetime) -> "EatenAt":
        return cls(raw)

    def date(self) -> date:
        """Calendar day in the timestamp's own timezone."""
        return self.value.date()

    def time_context(self) -> str:
        """Describe the time of day for advice prompts."""
        hour = self.value.hour
        if 5 <= hour < 10:
            return "morning (breakfast time)"
        if 10 <= hour < 14:
            return "midday (lunch time)"
        if 14 <= hour < 17:
            return "afternoon (snack time)"
        if 17 <= hour < 22:
            return "evening (dinner time)"
        return "late night"

    def __str__(self) -> str:
        return self.value.isoformat()
