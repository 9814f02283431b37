"""In-memory implementation of ISessionRepository."""

from copy import deepcopy
from typing import Dict, Optional

from domain.session.core.entities.session import Session
from domain.session.core.ports.session_repository import ISessionRepository
from domain.session.core.value_objects.session_id import SessionId
from domain.shared.value_objects.identifiers import UserId


class InMemorySessionRepository(ISessionRepository):
    """In-memory implementation of session repository."""

    def __init__(self) -> None:
        self._sessions: Dict[str, Session] = {}

    async def save(self, session: Session) -> None:
        self._sessions[session.id.value] = deepcopy(session)

    async def find_by_id(self, session_id: SessionId) -> Optional[Session]:
        session = self._sessions.get(session_id.value)
        return deepcopy(session) if session else None

    async def delete_by_id(self, session_id: SessionId) -> bool:
        return self._sessions.pop(session_id.value, None) is not None

    async def delete_by_user_id(self, user_id: UserId) -> int:
        doomed = [key for key, session in self._sessions.items() if session.user_id == user_id]
        for key in doomed:
            del self._sessions[key]
        return len(doomed)

    def snapshot(self) -> Dict[str, Session]:
        return deepcopy(self._sessions)

    def restore(self, state: Dict[str, Session]) -> None:
        self._sessions = state

    def clear(self) -> None:
        """Clear all sessions (for testing)."""
        self._sessions.clear()
