"""ExpiresAt value object - session expiry instant."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from domain.shared.clock import Clock
from domain.shared.errors import SessionExpiredError

SESSION_DURATION_DAYS = 7


@dataclass(frozen=True)
class ExpiresAt:
    """Instant after which a session is no longer valid.

    Expiry is evaluated on every read against the clock; it is never
    stored as a state.

    Examples:
        >>> clock = FixedClock(datetime(2025, 1, 1, 12, 0, tzinfo=JST))
        >>> expires_at = ExpiresAt.issue(clock)
        >>> expires_at.is_expired(clock.advanced(days=7))
        False
        >>> expires_at.is_expired(clock.advanced(days=7, seconds=1))
        True
    """

    value: datetime

    @classmethod
    def issue(cls, clock: Clock) -> "ExpiresAt":
        """Expiry for a session created now."""
        return cls.starting_at(clock.now())

    @classmethod
    def starting_at(cls, created_at: datetime) -> "ExpiresAt":
        """Expiry for a session created at ``created_at``."""
        return cls(created_at + timedelta(days=SESSION_DURATION_DAYS))

    @classmethod
    def reconstruct(cls, raw: datetime) -> "ExpiresAt":
        return cls(raw)

    def is_expired(self, clock: Clock) -> bool:
        return clock.now() > self.value

    def ensure_not_expired(self, clock: Clock) -> None:
        """Raise ``SessionExpiredError`` once the expiry has passed."""
        if self.is_expired(clock):
            raise SessionExpiredError()

    def __str__(self) -> str:
        return self.value.isoformat()
