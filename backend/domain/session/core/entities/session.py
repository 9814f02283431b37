"""Session entity - authenticated login session."""

from dataclasses import dataclass
from datetime import datetime

from domain.session.core.value_objects.expires_at import ExpiresAt
from domain.session.core.value_objects.session_id import SessionId
from domain.shared.clock import Clock
from domain.shared.value_objects.identifiers import UserId


@dataclass
class Session:
    """Login session owned by a user.

    Lifecycle: created -> valid (now <= expires_at) -> expired. Expiry
    is derived from the clock on every check, never stored.

    Examples:
        >>> clock = FixedClock(datetime(2025, 1, 1, 12, 0, tzinfo=JST))
        >>> session = Session.create(user_id, clock=clock)
        >>> session.is_expired(clock.advanced(days=7))
        False
        >>> session.ensure_not_expired(clock.advanced(days=8))
        Traceback (most recent call last):
        ...
        SessionExpiredError: session has expired
    """

    id: SessionId
    user_id: UserId
    expires_at: ExpiresAt
    created_at: datetime

    @classmethod
    def create(cls, user_id: UserId, *, clock: Clock) -> "Session":
        """Open a session valid for seven days from now.

        Raises:
            SessionIdGenerationFailedError: If the OS random source fails.
        """
        now = clock.now()
        return cls(
            id=SessionId.generate(),
            user_id=user_id,
            expires_at=ExpiresAt.starting_at(now),
            created_at=now,
        )

    @classmethod
    def reconstruct(
        cls, id: str, user_id: str, expires_at: datetime, created_at: datetime
    ) -> "Session":
        """Rebuild a session from storage.

        The token is re-parsed so a corrupted id is never handed out.

        Raises:
            InvalidSessionIdError: If the stored id is malformed.
        """
        return cls(
            id=SessionId.parse(id),
            user_id=UserId.reconstruct(user_id),
            expires_at=ExpiresAt.reconstruct(expires_at),
            created_at=created_at,
        )

    def is_expired(self, clock: Clock) -> bool:
        return self.expires_at.is_expired(clock)

    def ensure_not_expired(self, clock: Clock) -> None:
        self.expires_at.ensure_not_expired(clock)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Session):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
