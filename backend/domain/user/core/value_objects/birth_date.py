"""BirthDate value object."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from domain.shared.clock import Clock
from domain.shared.errors import BirthDateMustBePastError, BirthDateTooOldError

MAX_AGE_YEARS = 150


def _years_before(day: date, years: int) -> date:
    """Same calendar day ``years`` earlier; Feb 29 rolls to Mar 1."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return date(day.year - years, 3, 1)


def _as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class BirthDate:
    """Date of birth (date only, no time component).

    Invariants (checked against the clock's calendar day):
    - strictly before today
    - no more than 150 years before today

    Examples:
        >>> clock = FixedClock(datetime(2025, 6, 15, 9, 0, tzinfo=JST))
        >>> BirthDate.create(date(1990, 6, 15), clock).age(clock)
        35
        >>> BirthDate.create(date(1990, 6, 16), clock).age(clock)
        34
    """

    value: date

    @classmethod
    def create(cls, raw: Union[date, datetime], clock: Clock) -> "BirthDate":
        """Validate a birth date relative to ``clock``.

        Raises:
            BirthDateMustBePastError: If today or later.
            BirthDateTooOldError: If more than 150 years ago.
        """
        today = clock.now().date()
        birth_day = _as_date(raw)

        if birth_day >= today:
            raise BirthDateMustBePastError()

        if birth_day < _years_before(today, MAX_AGE_YEARS):
            raise BirthDateTooOldError()

        return cls(birth_day)

    @classmethod
    def reconstruct(cls, raw: Union[date, datetime]) -> "BirthDate":
        return cls(_as_date(raw))

    def age(self, clock: Clock) -> int:
        """Completed years of age on the clock's current day."""
        today = clock.now().date()
        years = today.year - self.value.year
        if (today.month, today.day) < (self.value.month, self.value.day):
            years -= 1
        return years

    def __str__(self) -> str:
        return self.value.isoformat()
