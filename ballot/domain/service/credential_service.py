"""Credential domain service."""

import logfire
from pydantic import ValidationError

from ballot.domain.error import NotAuthenticatedError
from ballot.domain.model.common import utcnow
from ballot.domain.model.user import User
from ballot.domain.repository import TokenRepository, UserRepository
from ballot.domain.value import TokenValue

from .base import Service


class CredentialService(Service):
    """Resolves credential tokens to users."""

    def __init__(
        self, token_repository: TokenRepository, user_repository: UserRepository
    ) -> None:
        """Initialize credential service.

        Args:
            token_repository: Token repository
            user_repository: User repository
        """
        self.token_repository = token_repository
        self.user_repository = user_repository

    async def resolve(self, token: str | None) -> User:
        """Resolve a raw token string to the user who owns it.

        Args:
            token: Token from the request header (may be missing)

        Returns:
            The authenticated user

        Raises:
            NotAuthenticatedError: If the token is missing, blank, unknown,
                expired or belongs to a user that no longer exists
        """
        with logfire.span("credential_service.resolve"):
            if token is None:
                logfire.debug("No credential presented")
                raise NotAuthenticatedError()

            try:
                value = TokenValue(token)
            except ValidationError:
                logfire.debug("Malformed credential presented")
                raise NotAuthenticatedError()

            issued = await self.token_repository.find_by_value(value)
            if issued is None:
                logfire.info("Unknown credential presented")
                raise NotAuthenticatedError()

            if not issued.is_valid_at(utcnow()):
                logfire.info("Expired credential presented", user_id=issued.user_id)
                raise NotAuthenticatedError()

            user = await self.user_repository.find_by_id(issued.user_id)
            if user is None:
                logfire.warn("Credential for missing user", user_id=issued.user_id)
                raise NotAuthenticatedError()

            return user
