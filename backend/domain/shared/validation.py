"""Validation accumulator for collect-all-errors construction."""

from typing import Callable, Iterable, Iterator, List, Optional, TypeVar

from domain.shared.errors import (
    AggregateValidationError,
    DomainError,
    DomainValidationError,
    FieldValidationError,
)

T = TypeVar("T")


class ValidationErrors:
    """Ordered collection of validation failures.

    Aggregate constructors run every value object factory through
    ``capture`` so a failing field never stops the remaining ones from
    being validated. Errors keep the order in which they were captured.

    Examples:
        >>> errors = ValidationErrors()
        >>> email = errors.capture(Email.create, "")
        >>> nickname = errors.capture(Nickname.create, "bob")
        >>> email is None, errors.messages()
        (True, ['email is required'])
        >>> errors.raise_if_any()
        Traceback (most recent call last):
        ...
        DomainValidationError: email is required
    """

    def __init__(self, errors: Optional[Iterable[DomainError]] = None) -> None:
        self._errors: List[DomainError] = list(errors or [])

    def capture(self, factory: Callable[..., T], *args: object, **kwargs: object) -> Optional[T]:
        """Call ``factory`` and record its validation error, if any.

        Only validation errors are captured; anything else propagates.

        Returns:
            The factory result, or None when it raised.
        """
        try:
            return factory(*args, **kwargs)
        except (FieldValidationError, AggregateValidationError) as exc:
            self._errors.append(exc)
        except DomainValidationError as exc:
            self._errors.extend(exc.errors)
        return None

    def add(self, error: DomainError) -> None:
        self._errors.append(error)

    def extend(self, errors: Iterable[DomainError]) -> None:
        self._errors.extend(errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def messages(self) -> List[str]:
        return [e.message for e in self._errors]

    def raise_if_any(self) -> None:
        """Raise ``DomainValidationError`` carrying every collected error."""
        if self._errors:
            raise DomainValidationError(self._errors)

    def __iter__(self) -> Iterator[DomainError]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return self.has_errors

    def __repr__(self) -> str:
        return f"ValidationErrors({self.messages()!r})"
