"""User entity - aggregate root."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Union

from domain.shared.clock import Clock
from domain.shared.validation import ValidationErrors
from domain.shared.value_objects.identifiers import UserId
from domain.user.core.value_objects.activity_level import ActivityLevel
from domain.user.core.value_objects.birth_date import BirthDate
from domain.user.core.value_objects.email import Email
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.height import Height
from domain.user.core.value_objects.nickname import Nickname
from domain.user.core.value_objects.password import (
    HashedPassword,
    Password,
    PasswordHasher,
)
from domain.user.core.value_objects.weight import Weight

if TYPE_CHECKING:
    from domain.nutrition.core.value_objects.body_profile import BodyProfile
    from domain.record.core.value_objects.calories import Calories
    from domain.record.core.value_objects.pfc import Pfc


@dataclass
class User:
    """User aggregate root.

    Holds the account credentials plus the body data the daily
    nutrition targets are derived from.

    Invariants:
    - every field is a valid value object
    - email and password are fixed after creation
    - profile fields change only through ``update_profile``, all at once

    Examples:
        >>> clock = FixedClock(datetime(2025, 6, 15, 9, 0, tzinfo=JST))
        >>> user = User.create(
        ...     email="taro@example.com",
        ...     password="password123",
        ...     nickname="taro",
        ...     weight=70.0,
        ...     height=175.0,
        ...     birth_date=date(1990, 12, 1),
        ...     gender="male",
        ...     activity_level="moderate",
        ...     clock=clock,
        ...     hasher=BcryptPasswordHasher(rounds=4),
        ... )
        >>> user.calculate_target_calories(clock).value
        2524

        >>> User.create(email="", password="short", ...)
        Traceback (most recent call last):
        ...
        DomainValidationError: email is required; password must be at least 8 characters
    """

    id: UserId
    email: Email
    hashed_password: HashedPassword
    nickname: Nickname
    weight: Weight
    height: Height
    birth_date: BirthDate
    gender: Gender
    activity_level: ActivityLevel
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        email: str,
        password: str,
        nickname: str,
        weight: float,
        height: float,
        birth_date: Union[date, datetime],
        gender: str,
        activity_level: str,
        *,
        clock: Clock,
        hasher: PasswordHasher,
    ) -> "User":
        """Factory method to register a new user.

        Every field is validated even after a failure; the password is
        only hashed when it is valid.

        Raises:
            DomainValidationError: Carrying every failed field rule, in
                argument order.
        """
        errors = ValidationErrors()

        email_vo = errors.capture(Email.create, email)
        password_vo = errors.capture(Password.create, password)
        nickname_vo = errors.capture(Nickname.create, nickname)
        weight_vo = errors.capture(Weight.create, weight)
        height_vo = errors.capture(Height.create, height)
        birth_date_vo = errors.capture(BirthDate.create, birth_date, clock)
        gender_vo = errors.capture(Gender.create, gender)
        activity_level_vo = errors.capture(ActivityLevel.create, activity_level)

        errors.raise_if_any()

        now = clock.now()
        return cls(
            id=UserId.generate(),
            email=email_vo,
            hashed_password=password_vo.hash(hasher),
            nickname=nickname_vo,
            weight=weight_vo,
            height=height_vo,
            birth_date=birth_date_vo,
            gender=gender_vo,
            activity_level=activity_level_vo,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstruct(
        cls,
        id: str,
        email: str,
        hashed_password: str,
        nickname: str,
        weight: float,
        height: float,
        birth_date: Union[date, datetime],
        gender: str,
        activity_level: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Rebuild a user from trusted storage without validation."""
        return cls(
            id=UserId.reconstruct(id),
            email=Email.reconstruct(email),
            hashed_password=HashedPassword.reconstruct(hashed_password),
            nickname=Nickname.reconstruct(nickname),
            weight=Weight.reconstruct(weight),
            height=Height.reconstruct(height),
            birth_date=BirthDate.reconstruct(birth_date),
            gender=Gender.reconstruct(gender),
            activity_level=ActivityLevel.reconstruct(activity_level),
            created_at=created_at,
            updated_at=updated_at,
        )

    def update_profile(
        self,
        nickname: str,
        height: float,
        weight: float,
        activity_level: str,
        *,
        clock: Clock,
    ) -> None:
        """Replace the editable profile fields.

        All four values are validated first; on any failure nothing is
        changed.

        Raises:
            DomainValidationError: Carrying every failed field rule.
        """
        errors = ValidationErrors()

        nickname_vo = errors.capture(Nickname.create, nickname)
        height_vo = errors.capture(Height.create, height)
        weight_vo = errors.capture(Weight.create, weight)
        activity_level_vo = errors.capture(ActivityLevel.create, activity_level)

        errors.raise_if_any()

        self.nickname = nickname_vo
        self.height = height_vo
        self.weight = weight_vo
        self.activity_level = activity_level_vo
        self.updated_at = clock.now()

    def verify_password(self, password: str, hasher: PasswordHasher) -> bool:
        """Check a raw password against the stored hash.

        Invalid raw passwords never match.
        """
        if not password:
            return False
        return hasher.verify(Password(password), self.hashed_password)

    def age(self, clock: Clock) -> int:
        return self.birth_date.age(clock)

    def body_profile(self, clock: Clock) -> "BodyProfile":
        from domain.nutrition.core.value_objects.body_profile import BodyProfile

        return BodyProfile(
            weight_kg=self.weight.kg,
            height_cm=self.height.cm,
            age=self.age(clock),
            gender=self.gender,
            activity_level=self.activity_level,
        )

    def calculate_target_calories(self, clock: Clock) -> "Calories":
        """Daily calorie target (Mifflin-St Jeor BMR × activity multiplier)."""
        from domain.nutrition.calculation.nutrition_target_service import (
            NutritionTargetService,
        )

        return NutritionTargetService().target_calories(self, clock)

    def calculate_target_pfc(self, clock: Clock) -> "Pfc":
        """Daily protein/fat/carbs target in grams."""
        from domain.nutrition.calculation.nutrition_target_service import (
            NutritionTargetService,
        )

        return NutritionTargetService().target_pfc(self, clock)

    def __eq__(self, other: object) -> bool:
        """Equality based on id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on id (aggregate identity)."""
        return hash(self.id)
