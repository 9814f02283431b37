"""Queries for the user context."""

from .get_user import GetUserQuery, GetUserQueryHandler

__all__ = ["GetUserQuery", "GetUserQueryHandler"]
