"""UpdateProfileCommand - change a user's editable profile fields."""

from dataclasses import dataclass
from typing import Optional

import structlog

from domain.shared.clock import Clock, SystemClock
from domain.shared.errors import DomainValidationError, UserNotFoundError
from domain.shared.ports.transaction_manager import ITransactionManager
from domain.shared.value_objects.identifiers import UserId
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class UpdateProfileCommand:
    """Command to update a user profile.

    All four fields are required and replaced together.
    """

    user_id: UserId
    nickname: str
    height: float
    weight: float
    activity_level: str


class UpdateProfileHandler:
    """Handler for UpdateProfileCommand.

    Loads the user, applies the update all-or-nothing and persists it,
    inside one transaction.
    """

    def __init__(
        self,
        repository: IUserRepository,
        transaction_manager: ITransactionManager,
        clock: Optional[Clock] = None,
    ):
        self._repository = repository
        self._transaction_manager = transaction_manager
        self._clock = clock or SystemClock()

    async def handle(self, command: UpdateProfileCommand) -> User:
        """
        Handle profile update command.

        Raises:
            UserNotFoundError: If the user doesn't exist
            DomainValidationError: If any field is invalid (nothing changed)
        """

        async def work() -> User:
            user = await self._repository.find_by_id(command.user_id)
            if user is None:
                logger.warning(
                    "user not found",
                    operation="update_profile",
                    user_id=str(command.user_id),
                )
                raise UserNotFoundError()

            try:
                user.update_profile(
                    nickname=command.nickname,
                    height=command.height,
                    weight=command.weight,
                    activity_level=command.activity_level,
                    clock=self._clock,
                )
            except DomainValidationError as e:
                logger.warning(
                    "validation errors",
                    operation="update_profile",
                    user_id=str(command.user_id),
                    errors=e.messages,
                )
                raise

            await self._repository.update(user)
            return user

        return await self._transaction_manager.execute(work)
