"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ballot.domain.model.user import User
from ballot.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a user and return it with its id set."""
        pass
