"""SQL implementation of Token repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import Token
from ballot.domain.repository import TokenRepository
from ballot.domain.value import TokenValue
from ballot.persistence.mappers import row_to_token, token_to_dict
from ballot.persistence.tables import tokens_table


class SqlTokenRepository(TokenRepository):
    """SQL implementation of TokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_value(self, value: TokenValue) -> Optional[Token]:
        """Find a token by its opaque value."""
        stmt = select(tokens_table).where(tokens_table.c.value == value.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_token(dict(row)) if row else None

    async def save(self, token: Token) -> Token:
        """Store an issued token."""
        stmt = insert(tokens_table).values(**token_to_dict(token))
        await self.session.execute(stmt)
        await self.session.flush()
        return token
