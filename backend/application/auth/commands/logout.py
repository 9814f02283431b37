"""LogoutCommand - end a session."""

from dataclasses import dataclass, field

import structlog

from domain.session.core.ports.session_repository import ISessionRepository
from domain.session.core.value_objects.session_id import SessionId
from domain.shared.errors import InvalidSessionIdError
from domain.shared.ports.transaction_manager import ITransactionManager

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class LogoutCommand:
    session_id: str = field(repr=False)


class LogoutHandler:
    """Handler for LogoutCommand.

    Deleting an unknown (but well-formed) session is not an error.
    """

    def __init__(
        self,
        session_repository: ISessionRepository,
        transaction_manager: ITransactionManager,
    ):
        self._session_repository = session_repository
        self._transaction_manager = transaction_manager

    async def handle(self, command: LogoutCommand) -> None:
        """
        Raises:
            InvalidSessionIdError: If the token is malformed
        """
        try:
            session_id = SessionId.parse(command.session_id)
        except InvalidSessionIdError:
            logger.warning("invalid session id", operation="logout")
            raise

        async def work() -> None:
            await self._session_repository.delete_by_id(session_id)

        await self._transaction_manager.execute(work)
