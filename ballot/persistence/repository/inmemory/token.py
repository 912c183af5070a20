"""In-memory token repository for testing."""

from typing import Optional

from ballot.domain.model.token import Token
from ballot.domain.repository.token import TokenRepository
from ballot.domain.value import TokenValue


class InMemoryTokenRepository(TokenRepository):
    """In-memory implementation of TokenRepository for testing."""

    def __init__(self) -> None:
        self._tokens: dict[str, Token] = {}

    async def find_by_value(self, value: TokenValue) -> Optional[Token]:
        """Find a token by its value."""
        return self._tokens.get(value.root)

    async def save(self, token: Token) -> Token:
        """Save a token."""
        self._tokens[token.value.root] = token
        return token
