"""Get user query."""

from dataclasses import dataclass

import structlog

from domain.shared.errors import UserNotFoundError
from domain.shared.value_objects.identifiers import UserId
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class GetUserQuery:
    """Query: get a user's profile by id."""

    user_id: UserId


class GetUserQueryHandler:
    """Handler for GetUserQuery."""

    def __init__(self, repository: IUserRepository):
        self._repository = repository

    async def handle(self, query: GetUserQuery) -> User:
        """
        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        user = await self._repository.find_by_id(query.user_id)
        if user is None:
            logger.warning("user not found", operation="get_user", user_id=str(query.user_id))
            raise UserNotFoundError()
        return user
