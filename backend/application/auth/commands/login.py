"""LoginCommand - exchange credentials for a session."""

from dataclasses import dataclass, field
from typing import Optional

import structlog

from domain.session.core.entities.session import Session
from domain.session.core.ports.session_repository import ISessionRepository
from domain.shared.clock import Clock, SystemClock
from domain.shared.errors import FieldValidationError, InvalidCredentialsError
from domain.shared.ports.transaction_manager import ITransactionManager
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.password import Password, PasswordHasher

logger = structlog.get_logger(__name__, layer="application")


@dataclass(frozen=True)
class LoginCommand:
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class LoginResult:
    """Opened session plus the authenticated user."""

    session: Session
    user: User


class LoginHandler:
    """Handler for LoginCommand.

    Every failure (malformed input, unknown email, wrong password) is
    reported as ``InvalidCredentialsError`` so callers cannot tell
    which emails are registered.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        session_repository: ISessionRepository,
        transaction_manager: ITransactionManager,
        hasher: PasswordHasher,
        clock: Optional[Clock] = None,
    ):
        self._user_repository = user_repository
        self._session_repository = session_repository
        self._transaction_manager = transaction_manager
        self._hasher = hasher
        self._clock = clock or SystemClock()

    async def handle(self, command: LoginCommand) -> LoginResult:
        """
        Raises:
            InvalidCredentialsError: On any credential mismatch
            SessionIdGenerationFailedError: If no token can be generated
        """
        try:
            email = Email.create(command.email)
        except FieldValidationError:
            logger.warning("invalid email format", operation="login", email=command.email)
            raise InvalidCredentialsError() from None

        try:
            password = Password.create(command.password)
        except FieldValidationError:
            logger.warning("invalid password format", operation="login")
            raise InvalidCredentialsError() from None

        async def work() -> LoginResult:
            user = await self._user_repository.find_by_email(email)
            if user is None:
                logger.warning("user not found", operation="login", email=email.value)
                raise InvalidCredentialsError()

            if not user.hashed_password.verify(password, self._hasher):
                logger.warning("password mismatch", operation="login", email=email.value)
                raise InvalidCredentialsError()

            session = Session.create(user.id, clock=self._clock)
            await self._session_repository.save(session)
            return LoginResult(session=session, user=user)

        result = await self._transaction_manager.execute(work)
        logger.info("user logged in", operation="login", user_id=str(result.user.id))
        return result
