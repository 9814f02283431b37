"""Commands for the user context."""

from .register_user import RegisterUserCommand, RegisterUserHandler
from .update_profile import UpdateProfileCommand, UpdateProfileHandler

__all__ = [
    "RegisterUserCommand",
    "RegisterUserHandler",
    "UpdateProfileCommand",
    "UpdateProfileHandler",
]
