"""Value objects for the user domain."""

from .activity_level import ActivityLevel
from .birth_date import BirthDate
from .email import Email
from .gender import Gender
from .height import Height
from .nickname import Nickname
from .password import BcryptPasswordHasher, HashedPassword, Password, PasswordHasher
from .weight import Weight

__all__ = [
    "ActivityLevel",
    "BcryptPasswordHasher",
    "BirthDate",
    "Email",
    "Gender",
    "HashedPassword",
    "Height",
    "Nickname",
    "Password",
    "PasswordHasher",
    "Weight",
]
