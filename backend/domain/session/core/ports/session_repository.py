"""Session repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.session.core.entities.session import Session
from domain.session.core.value_objects.session_id import SessionId
from domain.shared.value_objects.identifiers import UserId


class ISessionRepository(ABC):
    """Repository interface for Session."""

    @abstractmethod
    async def save(self, session: Session) -> None:
        pass

    @abstractmethod
    async def find_by_id(self, session_id: SessionId) -> Optional[Session]:
        """Find a session by token.

        Expired sessions are still returned; callers check expiry.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, session_id: SessionId) -> bool:
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UserId) -> int:
        """Delete every session of a user.

        Returns:
            Number of deleted sessions
        """
        pass
