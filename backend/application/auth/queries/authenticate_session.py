"""AuthenticateSessionQuery - resolve a session token."""

from dataclasses import dataclass, field
from typing import Optional

import structlog

from domain.session.core.entities.session import Session
from domain.session.core.ports.session_repository import ISessionRepository
from domain.session.core.value_objects.session_id import SessionId
from domain.shared.clock import Clock, SystemClock
from domain.shared.errors import SessionExpiredError, SessionNotFoundError

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class AuthenticateSessionQuery:
    """Query: validate the session token sent with a request."""

    session_id: str = field(repr=False)


class AuthenticateSessionQueryHandler:
    """Handler for AuthenticateSessionQuery.

    Example:
        >>> session = await handler.handle(AuthenticateSessionQuery(token))
        >>> session.user_id
        UserId('3fa85f64-5717-4562-b3fc-2c963f66afa6')
    """

    def __init__(self, session_repository: ISessionRepository, clock: Optional[Clock] = None):
        self._session_repository = session_repository
        self._clock = clock or SystemClock()

    async def handle(self, query: AuthenticateSessionQuery) -> Session:
        """
        Raises:
            InvalidSessionIdError: If the token is malformed
            SessionNotFoundError: If no such session exists
            SessionExpiredError: If the session has expired
        """
        session_id = SessionId.parse(query.session_id)

        session = await self._session_repository.find_by_id(session_id)
        if session is None:
            raise SessionNotFoundError()

        try:
            session.ensure_not_expired(self._clock)
        except SessionExpiredError:
            logger.warning(
                "session expired",
                operation="authenticate_session",
                user_id=str(session.user_id),
            )
            raise

        return session
