"""Clock port and implementations.

Every time-sensitive value object and entity takes a ``Clock`` argument
instead of reading the system time itself, so the domain stays
deterministic under test.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Protocol


# Japan Standard Time, the product's home timezone.
JST = timezone(timedelta(hours=9), "Asia/Tokyo")


class Clock(Protocol):
    """Provider of the current instant."""

    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""
        ...


@dataclass(frozen=True)
class SystemClock:
    """Clock backed by the system time.

    Attributes:
        tz: Timezone the returned datetimes are expressed in.

    Examples:
        >>> SystemClock().now().tzinfo is not None
        True
    """

    tz: tzinfo = JST

    def now(self) -> datetime:
        return datetime.now(self.tz)


@dataclass(frozen=True)
class FixedClock:
    """Clock frozen at a single instant.

    Examples:
        >>> clock = FixedClock(datetime(2025, 6, 15, 12, 0, tzinfo=JST))
        >>> clock.now().hour
        12
        >>> clock.advanced(hours=1).now().hour
        13
    """

    instant: datetime

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            raise ValueError("FixedClock instant must be timezone-aware")

    def now(self) -> datetime:
        return self.instant

    def advanced(self, **delta: float) -> "FixedClock":
        """Return a new clock moved forward by ``timedelta(**delta)``."""
        return FixedClock(self.instant + timedelta(**delta))


def start_of_day(moment: datetime) -> datetime:
    """Midnight of ``moment``'s calendar day, in ``moment``'s timezone."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime) -> datetime:
    """Midnight of the following day (exclusive upper bound)."""
    return start_of_day(moment) + timedelta(days=1)
