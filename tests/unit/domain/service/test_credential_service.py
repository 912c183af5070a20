"""Unit tests for CredentialService."""

from datetime import timedelta

import pytest

from ballot.domain.error import NotAuthenticatedError
from ballot.domain.model import Token
from ballot.domain.repository import TokenRepository
from ballot.domain.service import CredentialService
from ballot.domain.value import TokenValue, UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolve:
    """Tests for resolve method."""

    @pytest.mark.asyncio
    async def test_valid_token_resolves_to_user(self, unit_env):
        """A known token should resolve to its owner."""
        credential_service = await unit_env.get(CredentialService)
        user = await make_user(unit_env, "alice", token="alice-token")

        resolved = await credential_service.resolve("alice-token")

        assert resolved == user

    @pytest.mark.asyncio
    async def test_token_with_future_expiry_resolves(self, unit_env):
        credential_service = await unit_env.get(CredentialService)
        user = await make_user(
            unit_env, "alice", token="alice-token", expires_in=timedelta(hours=1)
        )

        assert await credential_service.resolve("alice-token") == user

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "   ", "x" * 256])
    async def test_missing_or_malformed_token_is_rejected(self, unit_env, token):
        """Absent, blank or oversized tokens never reach storage."""
        credential_service = await unit_env.get(CredentialService)

        with pytest.raises(NotAuthenticatedError, match="Authentication required"):
            await credential_service.resolve(token)

    @pytest.mark.asyncio
    async def test_unknown_token_is_rejected(self, unit_env):
        credential_service = await unit_env.get(CredentialService)
        await make_user(unit_env, "alice", token="alice-token")

        with pytest.raises(NotAuthenticatedError):
            await credential_service.resolve("someone-else")

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected(self, unit_env):
        """A token past its expiry no longer authenticates."""
        credential_service = await unit_env.get(CredentialService)
        await make_user(
            unit_env, "alice", token="old-token", expires_in=timedelta(seconds=-1)
        )

        with pytest.raises(NotAuthenticatedError):
            await credential_service.resolve("old-token")

    @pytest.mark.asyncio
    async def test_token_of_missing_user_is_rejected(self, unit_env):
        """A dangling token (user gone) does not authenticate."""
        credential_service = await unit_env.get(CredentialService)
        token_repo = await unit_env.get(TokenRepository)
        await token_repo.save(
            Token(value=TokenValue("orphan-token"), user_id=UserId(42))
        )

        with pytest.raises(NotAuthenticatedError):
            await credential_service.resolve("orphan-token")
