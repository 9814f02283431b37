"""Identifier value objects.

All aggregate identifiers are UUID strings. Each identifier type has
three factories:

- ``generate()``: new random UUID4.
- ``parse(raw)``: validating path, raises the identifier's own error.
- ``reconstruct(raw)``: trusted path, no validation.
"""

import uuid
from dataclasses import dataclass
from typing import ClassVar, Type, TypeVar

from domain.shared.errors import (
    FieldValidationError,
    InvalidAdviceCacheIdError,
    InvalidRecordIdError,
    InvalidRecordItemIdError,
    InvalidRecordPfcIdError,
    InvalidUserIdError,
    InvalidUuidFormatError,
)

IdT = TypeVar("IdT", bound="Identifier")


@dataclass(frozen=True)
class Identifier:
    """Base UUID identifier.

    Examples:
        >>> user_id = UserId.parse("3fa85f64-5717-4562-b3fc-2c963f66afa6")
        >>> str(user_id)
        '3fa85f64-5717-4562-b3fc-2c963f66afa6'
        >>> UserId.parse("nope")
        Traceback (most recent call last):
        ...
        InvalidUserIdError: invalid user id
    """

    value: str

    invalid_error: ClassVar[Type[FieldValidationError]] = InvalidUuidFormatError

    @classmethod
    def generate(cls: Type[IdT]) -> IdT:
        return cls(str(uuid.uuid4()))

    @classmethod
    def parse(cls: Type[IdT], raw: str) -> IdT:
        """Validate ``raw`` as a UUID and wrap it.

        Raises:
            FieldValidationError: The identifier's invalid-id error.
        """
        if not raw:
            raise cls.invalid_error()
        try:
            parsed = uuid.UUID(raw)
        except (ValueError, AttributeError, TypeError) as e:
            raise cls.invalid_error() from e
        return cls(str(parsed))

    @classmethod
    def reconstruct(cls: Type[IdT], raw: str) -> IdT:
        return cls(raw)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.value}')"


@dataclass(frozen=True, repr=False)
class UserId(Identifier):
    invalid_error: ClassVar[Type[FieldValidationError]] = InvalidUserIdError


@dataclass(frozen=True, repr=False)
class RecordId(Identifier):
    invalid_error: ClassVar[Type[FieldValidationError]] = InvalidRecordIdError


@dataclass(frozen=True, repr=False)
class RecordItemId(Identifier):
    invalid_error: ClassVar[Type[FieldValidationError]] = InvalidRecordItemIdError


@dataclass(frozen=True, repr=False)
class RecordPfcId(Identifier):
    invalid_error: ClassVar[Type[FieldValidationError]] = InvalidRecordPfcIdError


@dataclass(frozen=True, repr=False)
class AdviceCacheId(Identifier):
    invalid_error: ClassVar[Type[FieldValidationError]] = InvalidAdviceCacheIdError
