"""In-memory implementation of IUserRepository."""

from copy import deepcopy
from typing import Dict, Optional

from domain.shared.errors import UserNotFoundError
from domain.shared.value_objects.identifiers import UserId
from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email
from domain.user.core.ports.user_repository import IUserRepository


class InMemoryUserRepository(IUserRepository):
    """
    In-memory implementation of user repository.

    Uses a dictionary to store users in memory. Suitable for testing
    and development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    async def save(self, user: User) -> None:
        # Deep copy to prevent external mutations
        self._users[str(user.id)] = deepcopy(user)

    async def update(self, user: User) -> None:
        if str(user.id) not in self._users:
            raise UserNotFoundError()
        self._users[str(user.id)] = deepcopy(user)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        user = self._users.get(str(user_id))
        return deepcopy(user) if user else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return deepcopy(user)
        return None

    async def exists_by_email(self, email: Email) -> bool:
        return any(user.email == email for user in self._users.values())

    async def delete_by_id(self, user_id: UserId) -> bool:
        return self._users.pop(str(user_id), None) is not None

    def snapshot(self) -> Dict[str, User]:
        return deepcopy(self._users)

    def restore(self, state: Dict[str, User]) -> None:
        self._users = state

    def clear(self) -> None:
        """Clear all users (for testing)."""
        self._users.clear()
