"""In-memory user repository for testing."""

from itertools import count
from typing import Optional

from ballot.domain.model.user import User
from ballot.domain.repository.user import UserRepository
from ballot.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids = count(1)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Save a user, assigning an id when it has none."""
        if user.id is None:
            user = user.model_copy(update={"id": UserId(next(self._ids))})
        self._users[user.id] = user
        return user
