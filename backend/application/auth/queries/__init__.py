"""Queries for authentication."""

from .authenticate_session import (
    AuthenticateSessionQuery,
    AuthenticateSessionQueryHandler,
)

__all__ = ["AuthenticateSessionQuery", "AuthenticateSessionQueryHandler"]
