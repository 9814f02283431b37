"""Unit test configuration.

Isolates unit tests from integration test setup.
Unit tests should not depend on external services.
"""

from datetime import date, datetime
from typing import Any, Callable

import pytest

from domain.shared.clock import JST, FixedClock
from domain.user.core.entities.user import User
from domain.user.core.value_objects.password import BcryptPasswordHasher

# Sunday noon in Tokyo
NOW = datetime(2025, 6, 15, 12, 0, tzinfo=JST)


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen at 2025-06-15 12:00 JST."""
    return FixedClock(NOW)


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    """Real bcrypt at the minimum cost factor."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def user_fields() -> dict[str, Any]:
    """Valid raw registration fields (male, 70kg, 175cm, 34 years, moderate)."""
    return {
        "email": "taro@example.com",
        "password": "password123",
        "nickname": "taro",
        "weight": 70.0,
        "height": 175.0,
        "birth_date": date(1990, 12, 1),
        "gender": "male",
        "activity_level": "moderate",
    }


@pytest.fixture
def make_user(clock, hasher, user_fields) -> Callable[..., User]:
    """Factory building a valid user; keyword overrides replace fields."""

    def _make(**overrides: Any) -> User:
        fields = {**user_fields, **overrides}
        return User.create(**fields, clock=clock, hasher=hasher)

    return _make


@pytest.fixture
def user(make_user) -> User:
    return make_user()
