"""SQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import User
from ballot.domain.repository import UserRepository
from ballot.domain.value import UserId
from ballot.persistence.mappers import row_to_user, user_to_dict
from ballot.persistence.tables import users_table


class SqlUserRepository(UserRepository):
    """SQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert a user."""
        stmt = insert(users_table).values(**user_to_dict(user))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return user.model_copy(update={"id": UserId(result.inserted_primary_key[0])})
