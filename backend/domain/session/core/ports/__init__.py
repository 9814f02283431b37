from .session_repository import ISessionRepository

__all__ = ["ISessionRepository"]
