"""Commands for authentication."""

from .login import LoginCommand, LoginHandler, LoginResult
from .logout import LogoutCommand, LogoutHandler

__all__ = ["LoginCommand", "LoginHandler", "LoginResult", "LogoutCommand", "LogoutHandler"]
