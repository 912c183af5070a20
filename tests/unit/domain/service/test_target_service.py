"""Unit tests for TargetService."""

import pytest

from ballot.domain.error import NotFoundError
from ballot.domain.model import Article, Comment
from ballot.domain.service import TargetService
from ballot.domain.value import VotableType
from tests.conftest import make_article, make_comment, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLocate:
    """Tests for locate method."""

    @pytest.mark.asyncio
    async def test_locates_existing_article(self, unit_env):
        target_service = await unit_env.get(TargetService)
        user = await make_user(unit_env, "alice")
        article = await make_article(unit_env, user.id)

        target = await target_service.locate(VotableType.ARTICLE, article.id)

        assert isinstance(target, Article)
        assert target == article

    @pytest.mark.asyncio
    async def test_locates_existing_comment(self, unit_env):
        target_service = await unit_env.get(TargetService)
        user = await make_user(unit_env, "alice")
        article = await make_article(unit_env, user.id)
        comment = await make_comment(unit_env, article.id, user.id)

        target = await target_service.locate(VotableType.COMMENT, comment.id)

        assert isinstance(target, Comment)
        assert target == comment

    @pytest.mark.asyncio
    async def test_type_decides_which_collection_is_searched(self, unit_env):
        """An article id doesn't resolve as a comment."""
        target_service = await unit_env.get(TargetService)
        user = await make_user(unit_env, "alice")
        article = await make_article(unit_env, user.id)

        with pytest.raises(NotFoundError) as exc_info:
            await target_service.locate(VotableType.COMMENT, article.id)

        assert exc_info.value.resource == "Comment"
        assert exc_info.value.identifier == str(article.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("votable_id", [0, -1, 999])
    async def test_missing_article_raises_not_found(self, unit_env, votable_id):
        target_service = await unit_env.get(TargetService)

        with pytest.raises(NotFoundError, match="Article not found"):
            await target_service.locate(VotableType.ARTICLE, votable_id)
