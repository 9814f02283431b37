"""Unit tests for User entity."""

from datetime import date, datetime

import pytest

from domain.shared.clock import JST
from domain.shared.errors import (
    BirthDateMustBePastError,
    DomainValidationError,
    EmailRequiredError,
    HeightTooTallError,
    InvalidActivityLevelError,
    InvalidGenderError,
    NicknameRequiredError,
    PasswordTooShortError,
    WeightMustBePositiveError,
)
from domain.user.core.entities.user import User
from domain.user.core.value_objects import ActivityLevel, Gender, Height, Nickname, Weight


class TestUserCreate:
    """Test User.create factory."""

    def test_create_valid_user(self, make_user, clock):
        user = make_user()

        assert user.email.value == "taro@example.com"
        assert user.nickname == Nickname("taro")
        assert user.gender is Gender.MALE
        assert user.activity_level is ActivityLevel.MODERATE
        assert user.created_at == clock.now()
        assert user.updated_at == clock.now()

    def test_password_is_hashed(self, make_user, hasher):
        user = make_user()

        assert user.hashed_password.value != "password123"
        assert user.verify_password("password123", hasher)
        assert not user.verify_password("wrong-password", hasher)
        assert not user.verify_password("", hasher)

    def test_each_user_gets_new_id(self, make_user):
        assert make_user().id != make_user().id

    def test_collects_every_error_in_field_order(self, make_user):
        with pytest.raises(DomainValidationError) as exc_info:
            make_user(
                email="",
                password="short",
                nickname="",
                weight=0,
                height=301,
                birth_date=date(2030, 1, 1),
                gender="x",
                activity_level="lazy",
            )

        assert exc_info.value.errors == [
            EmailRequiredError(),
            PasswordTooShortError(),
            NicknameRequiredError(),
            WeightMustBePositiveError(),
            HeightTooTallError(),
            BirthDateMustBePastError(),
            InvalidGenderError(),
            InvalidActivityLevelError(),
        ]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"email": "bad"},
            {"email": "bad", "nickname": ""},
            {"weight": -1, "height": 0, "gender": ""},
            {"password": "", "activity_level": "", "birth_date": date(1800, 1, 1), "nickname": ""},
        ],
    )
    def test_k_invalid_fields_give_k_errors(self, make_user, overrides):
        with pytest.raises(DomainValidationError) as exc_info:
            make_user(**overrides)

        assert len(exc_info.value.errors) == len(overrides)

    def test_invalid_password_is_never_hashed(self, clock, user_fields):
        class ExplodingHasher:
            def hash(self, password):
                raise AssertionError("must not hash")

            def verify(self, password, hashed):
                raise AssertionError("must not verify")

        with pytest.raises(DomainValidationError):
            User.create(**{**user_fields, "password": "short"}, clock=clock, hasher=ExplodingHasher())


class TestUserReconstruct:
    """Test User.reconstruct."""

    def test_round_trip(self, user):
        rebuilt = User.reconstruct(
            id=user.id.value,
            email=user.email.value,
            hashed_password=user.hashed_password.value,
            nickname=user.nickname.value,
            weight=user.weight.kg,
            height=user.height.cm,
            birth_date=user.birth_date.value,
            gender=user.gender.value,
            activity_level=user.activity_level.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        assert rebuilt.id == user.id
        assert rebuilt.email == user.email
        assert rebuilt.hashed_password == user.hashed_password
        assert rebuilt.nickname == user.nickname
        assert rebuilt.weight == user.weight
        assert rebuilt.height == user.height
        assert rebuilt.birth_date == user.birth_date
        assert rebuilt.gender == user.gender
        assert rebuilt.activity_level == user.activity_level
        assert rebuilt.created_at == user.created_at
        assert rebuilt.updated_at == user.updated_at


class TestUpdateProfile:
    """Test User.update_profile."""

    def test_update_all_fields(self, user, clock):
        later = clock.advanced(days=1)

        user.update_profile(
            nickname="jiro", height=180.0, weight=72.5, activity_level="active", clock=later
        )

        assert user.nickname == Nickname("jiro")
        assert user.height == Height(180.0)
        assert user.weight == Weight(72.5)
        assert user.activity_level is ActivityLevel.ACTIVE
        assert user.updated_at == later.now()
        assert user.created_at == clock.now()

    def test_all_or_nothing(self, user, clock):
        before = (user.nickname, user.height, user.weight, user.activity_level, user.updated_at)

        with pytest.raises(DomainValidationError) as exc_info:
            user.update_profile(
                nickname="jiro", height=0, weight=72.5, activity_level="bogus", clock=clock.advanced(days=1)
            )

        assert len(exc_info.value.errors) == 2
        assert (user.nickname, user.height, user.weight, user.activity_level, user.updated_at) == before


class TestTargets:
    """Daily target convenience methods."""

    def test_reference_user_target_calories(self, user, clock):
        # male, 70kg, 175cm, 34y, moderate: BMR 1628.75 * 1.55 = 2524.56
        assert user.age(clock) == 34
        assert user.calculate_target_calories(clock).value == 2524

    def test_target_pfc(self, user, clock):
        pfc = user.calculate_target_pfc(clock)

        assert pfc.protein == pytest.approx(2524 * 0.15 / 4)
        assert pfc.fat == pytest.approx(2524 * 0.25 / 9)
        assert pfc.carbs == pytest.approx(2524 * 0.60 / 4)

    def test_body_profile(self, user, clock):
        profile = user.body_profile(clock)

        assert profile.weight_kg == 70.0
        assert profile.height_cm == 175.0
        assert profile.age == 34
        assert profile.gender is Gender.MALE


class TestEquality:
    def test_identity_equality(self, make_user):
        user = make_user()
        other = make_user()

        assert user != other
        assert user == user
        assert len({user, user}) == 1

    def test_created_at_comes_from_clock(self, make_user):
        assert make_user().created_at == datetime(2025, 6, 15, 12, 0, tzinfo=JST)
