"""Token repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ballot.domain.model.token import Token
from ballot.domain.value import TokenValue


class TokenRepository(ABC):
    """Lookup of issued credential tokens."""

    @abstractmethod
    async def find_by_value(self, value: TokenValue) -> Optional[Token]:
        """Find a token by its opaque value.

        Args:
            value: Token string presented by the client

        Returns:
            The token if one was issued with this value, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, token: Token) -> Token:
        """Store an issued token."""
        pass
