"""Unit tests for CastVoteUseCase."""

import pytest

from ballot.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from ballot.domain.error import DuplicateVoteError, NotFoundError
from ballot.domain.repository import VoteRepository
from ballot.domain.value import VotableType, VoteId
from tests.conftest import make_article, make_comment, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_on_article_returns_new_vote_id(self, unit_env):
        """Voting on an article should answer with the stored vote's id."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        vote_repo = await unit_env.get(VoteRepository)
        user = await make_user(unit_env, "alice")
        article = await make_article(unit_env, user.id)

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.ARTICLE,
                votable_id=article.id,
                user_id=user.id,
            )
        )

        # Assert
        vote = await vote_repo.find_by_id(VoteId(response.id))
        assert vote is not None
        assert vote.user_id == user.id
        assert vote.votable_id == article.id

    @pytest.mark.asyncio
    async def test_vote_on_comment_returns_new_vote_id(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        vote_repo = await unit_env.get(VoteRepository)
        user = await make_user(unit_env, "alice")
        article = await make_article(unit_env, user.id)
        comment = await make_comment(unit_env, article.id, user.id)

        response = await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.COMMENT,
                votable_id=comment.id,
                user_id=user.id,
            )
        )

        vote = await vote_repo.find_by_id(VoteId(response.id))
        assert vote.votable_type == VotableType.COMMENT

    @pytest.mark.asyncio
    async def test_vote_on_missing_target_raises_not_found(self, unit_env):
        """No vote is stored when the target doesn't exist."""
        use_case = await unit_env.get(CastVoteUseCase)
        vote_repo = await unit_env.get(VoteRepository)
        user = await make_user(unit_env, "alice")

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    votable_type=VotableType.COMMENT,
                    votable_id=999,
                    user_id=user.id,
                )
            )

        assert await vote_repo.find_by_id(VoteId(1)) is None

    @pytest.mark.asyncio
    async def test_repeat_vote_raises_duplicate(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        user = await make_user(unit_env, "alice")
        article = await make_article(unit_env, user.id)
        request = CastVoteRequest(
            votable_type=VotableType.ARTICLE,
            votable_id=article.id,
            user_id=user.id,
        )
        await use_case.execute(request)

        with pytest.raises(DuplicateVoteError):
            await use_case.execute(request)
