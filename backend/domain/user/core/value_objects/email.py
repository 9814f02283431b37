"""Email value object."""

import re
from dataclasses import dataclass

from domain.shared.errors import (
    EmailRequiredError,
    EmailTooLongError,
    InvalidEmailFormatError,
)

MAX_EMAIL_LENGTH = 254

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email:
    """User email address.

    Examples:
        >>> Email.create("user@example.com").value
        'user@example.com'
        >>> Email.create("not-an-email")
        Traceback (most recent call last):
        ...
        InvalidEmailFormatError: invalid email format
    """

    value: str

    @classmethod
    def create(cls, raw: str) -> "Email":
        """Validate and wrap an email address.

        Raises:
            EmailRequiredError: If ``raw`` is empty.
            EmailTooLongError: If longer than 254 characters.
            InvalidEmailFormatError: If not ``local@domain.tld``.
        """
        if not raw:
            raise EmailRequiredError()
        if len(raw) > MAX_EMAIL_LENGTH:
            raise EmailTooLongError()
        if not _EMAIL_PATTERN.fullmatch(raw):
            raise InvalidEmailFormatError()
        return cls(raw)

    @classmethod
    def reconstruct(cls, raw: str) -> "Email":
        return cls(raw)

    def __str__(self) -> str:
        return self.value
