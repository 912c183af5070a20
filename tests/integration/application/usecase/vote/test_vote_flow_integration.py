"""Integration tests for casting and deleting votes against SQLite."""

import asyncio

import pytest

from ballot.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    CountVotesRequest,
    CountVotesUseCase,
    DeleteVoteRequest,
    DeleteVoteUseCase,
)
from ballot.domain.error import DuplicateVoteError, NotFoundError
from ballot.domain.value import VotableType
from tests.conftest import make_article, make_comment, make_user
from tests.harness import create_container_fixture

integration_container = create_container_fixture(unmock={"persistence"})


async def _seed(container):
    async with container() as request:
        alice = await make_user(request, "alice", token="alice-token")
        bob = await make_user(request, "bob", token="bob-token")
        article = await make_article(request, alice.id)
        comment = await make_comment(request, article.id, bob.id)
    return alice, bob, article, comment


async def _cast(container, votable_type, votable_id, user_id):
    async with container() as request:
        use_case = await request.get(CastVoteUseCase)
        return await use_case.execute(
            CastVoteRequest(
                votable_type=votable_type, votable_id=votable_id, user_id=user_id
            )
        )


async def _count(container, votable_type, votable_id):
    async with container() as request:
        use_case = await request.get(CountVotesUseCase)
        response = await use_case.execute(
            CountVotesRequest(votable_type=votable_type, votable_id=votable_id)
        )
        return response.count


class TestVoteFlowIntegration:
    """Cast, count and delete across separate requests."""

    @pytest.mark.asyncio
    async def test_cast_count_delete(self, integration_container):
        # Arrange
        alice, bob, article, _ = await _seed(integration_container)

        # Act
        alice_vote = await _cast(
            integration_container, VotableType.ARTICLE, article.id, alice.id
        )
        await _cast(integration_container, VotableType.ARTICLE, article.id, bob.id)

        # Assert
        assert (
            await _count(integration_container, VotableType.ARTICLE, article.id) == 2
        )

        async with integration_container() as request:
            delete_use_case = await request.get(DeleteVoteUseCase)
            await delete_use_case.execute(
                DeleteVoteRequest(vote_id=alice_vote.id, user_id=alice.id)
            )

        assert (
            await _count(integration_container, VotableType.ARTICLE, article.id) == 1
        )

    @pytest.mark.asyncio
    async def test_vote_on_missing_comment(self, integration_container):
        alice, _, _, comment = await _seed(integration_container)

        with pytest.raises(NotFoundError):
            await _cast(
                integration_container, VotableType.COMMENT, comment.id + 100, alice.id
            )

    @pytest.mark.asyncio
    async def test_concurrent_votes_store_exactly_one(self, integration_container):
        """Simultaneous requests from one user: one vote, the rest rejected."""
        # Arrange
        alice, _, _, comment = await _seed(integration_container)

        # Act
        results = await asyncio.gather(
            *(
                _cast(integration_container, VotableType.COMMENT, comment.id, alice.id)
                for _ in range(5)
            ),
            return_exceptions=True,
        )

        # Assert
        created = [r for r in results if not isinstance(r, Exception)]
        duplicates = [r for r in results if isinstance(r, DuplicateVoteError)]
        assert len(created) == 1
        assert len(duplicates) == 4
        assert (
            await _count(integration_container, VotableType.COMMENT, comment.id) == 1
        )
