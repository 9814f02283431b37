"""Value objects for the session domain."""

from .expires_at import SESSION_DURATION_DAYS, ExpiresAt
from .session_id import SessionId

__all__ = ["ExpiresAt", "SESSION_DURATION_DAYS", "SessionId"]
