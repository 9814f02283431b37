"""Password and HashedPassword value objects.

A ``Password`` only lives long enough to be hashed; aggregates store
the ``HashedPassword``.
"""

from dataclasses import dataclass, field
from typing import Protocol

import bcrypt

from domain.shared.errors import (
    PasswordRequiredError,
    PasswordTooLongError,
    PasswordTooShortError,
)

MIN_PASSWORD_LENGTH = 8
# bcrypt ignores (or rejects) input past 72 bytes
MAX_PASSWORD_BYTES = 72
DEFAULT_BCRYPT_ROUNDS = 10


@dataclass(frozen=True)
class Password:
    """Raw user password (never persisted)."""

    value: str = field(repr=False)

    @classmethod
    def create(cls, raw: str) -> "Password":
        """Validate a raw password.

        Raises:
            PasswordRequiredError: If ``raw`` is empty.
            PasswordTooShortError: If shorter than 8 characters.
            PasswordTooLongError: If longer than 72 bytes in UTF-8.
        """
        if not raw:
            raise PasswordRequiredError()
        if len(raw) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError()
        if len(raw.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise PasswordTooLongError()
        return cls(raw)

    def hash(self, hasher: "PasswordHasher") -> "HashedPassword":
        return hasher.hash(self)


@dataclass(frozen=True)
class HashedPassword:
    """One-way password hash as stored with the user."""

    value: str = field(repr=False)

    @classmethod
    def reconstruct(cls, raw: str) -> "HashedPassword":
        return cls(raw)

    def verify(self, password: Password, hasher: "PasswordHasher") -> bool:
        return hasher.verify(password, self)

    def __str__(self) -> str:
        return self.value


class PasswordHasher(Protocol):
    """Slow, salted one-way hash."""

    def hash(self, password: Password) -> HashedPassword:
        ...

    def verify(self, password: Password, hashed: HashedPassword) -> bool:
        ...


@dataclass(frozen=True)
class BcryptPasswordHasher:
    """``PasswordHasher`` backed by bcrypt.

    Attributes:
        rounds: bcrypt cost factor (log2 of iterations).

    Examples:
        >>> hasher = BcryptPasswordHasher(rounds=4)
        >>> hashed = hasher.hash(Password.create("secret-pass"))
        >>> hasher.verify(Password.create("secret-pass"), hashed)
        True
    """

    rounds: int = DEFAULT_BCRYPT_ROUNDS

    def hash(self, password: Password) -> HashedPassword:
        digest = bcrypt.hashpw(password.value.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds))
        return HashedPassword(digest.decode("utf-8"))

    def verify(self, password: Password, hashed: HashedPassword) -> bool:
        try:
            return bcrypt.checkpw(password.value.encode("utf-8"), hashed.value.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False
