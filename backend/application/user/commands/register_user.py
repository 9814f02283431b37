"""RegisterUserCommand - create a new user account."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

import structlog

from domain.shared.clock import Clock, SystemClock
from domain.shared.errors import DomainValidationError, EmailAlreadyExistsError
from domain.shared.ports.transaction_manager import ITransactionManager
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.password import PasswordHasher

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class RegisterUserCommand:
    """Command to register a user.

    Attributes:
        email: Login email
        password: Raw password (hashed by the handler)
        nickname: Display name
        weight: Body weight in kg
        height: Height in cm
        birth_date: Date of birth
        gender: male / female / other
        activity_level: sedentary / light / moderate / active / veryActive
    """

    email: str
    password: str
    nickname: str
    weight: float
    height: float
    birth_date: date
    gender: str
    activity_level: str


class RegisterUserHandler:
    """Handler for RegisterUserCommand.

    1. Builds the User aggregate (every field validated)
    2. Rejects an already registered email
    3. Persists the user

    Steps 2 and 3 run in one transaction.
    """

    def __init__(
        self,
        repository: IUserRepository,
        transaction_manager: ITransactionManager,
        hasher: PasswordHasher,
        clock: Optional[Clock] = None,
    ):
        self._repository = repository
        self._transaction_manager = transaction_manager
        self._hasher = hasher
        self._clock = clock or SystemClock()

    async def handle(self, command: RegisterUserCommand) -> User:
        """
        Handle register command.

        Returns:
            The persisted User

        Raises:
            DomainValidationError: If any field is invalid
            EmailAlreadyExistsError: If the email is taken
        """
        try:
            user = User.create(
                email=command.email,
                password=command.password,
                nickname=command.nickname,
                weight=command.weight,
                height=command.height,
                birth_date=command.birth_date,
                gender=command.gender,
                activity_level=command.activity_level,
                clock=self._clock,
                hasher=self._hasher,
            )
        except DomainValidationError as e:
            logger.warning(
                "validation errors",
                operation="register_user",
                errors=e.messages,
            )
            raise

        async def work() -> None:
            if await self._repository.exists_by_email(user.email):
                logger.warning(
                    "email already exists",
                    operation="register_user",
                    email=user.email.value,
                )
                raise EmailAlreadyExistsError()
            await self._repository.save(user)

        await self._transaction_manager.execute(work)

        logger.info("user registered", operation="register_user", user_id=str(user.id))
        return user
