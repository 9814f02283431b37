"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.shared.value_objects.identifiers import UserId
from domain.user.core.entities.user import User
from domain.user.core.value_objects.email import Email


class IUserRepository(ABC):
    """Repository interface for User aggregate.

    Defines contract for user persistence operations.
    Implementations must handle User entity serialization/deserialization
    and rebuild users through ``User.reconstruct``.
    """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Persist a new user.

        Args:
            user: User entity to persist
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """Persist changes to an existing user.

        Raises:
            UserNotFoundError: If the user was never saved
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by ID.

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find user by email (the login key).

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """Check if an email is already registered.

        Note:
            More efficient than find_by_email when only checking existence.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: UserId) -> bool:
        """Delete user by ID.

        Returns:
            True if user was deleted, False if not found
        """
        pass
