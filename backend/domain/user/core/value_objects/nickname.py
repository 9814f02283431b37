"""Nickname value object."""

from dataclasses import dataclass

from domain.shared.errors import NicknameRequiredError, NicknameTooLongError

MAX_NICKNAME_LENGTH = 50


@dataclass(frozen=True)
class Nickname:
    """Display name shown to the user (1-50 characters)."""

    value: str

    @classmethod
    def create(cls, raw: str) -> "Nickname":
        if not raw:
            raise NicknameRequiredError()
        if len(raw) > MAX_NICKNAME_LENGTH:
            raise NicknameTooLongError()
        return cls(raw)

    @classmethod
    def reconstruct(cls, raw: str) -> "Nickname":
        return cls(raw)

    def __str__(self) -> str:
        return self.value
