"""StatisticsPeriod value object."""

from enum import Enum

from domain.shared.errors import InvalidStatisticsPeriodError


class StatisticsPeriod(str, Enum):
    """Window used for calorie statistics. Empty input means a week."""

    WEEK = "week"
    MONTH = "month"

    @classmethod
    def create(cls, raw: str) -> "StatisticsPeriod":
        """Parse a period, defaulting to WEEK on empty input.

        Raises:
            InvalidStatisticsPeriodError: If not ``week`` or ``month``.
        """
        if not raw:
            return cls.WEEK
        try:
            return cls(raw)
        except ValueError as e:
            raise InvalidStatisticsPeriodError() from e

    def days(self) -> int:
        return 7 if self is StatisticsPeriod.WEEK else 30

    def __str__(self) -> str:
        return self.value
