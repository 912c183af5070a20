"""Unit tests for vote-related domain models."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from ballot.domain.model import Article, Comment, Token, Vote
from ballot.domain.model.common import utcnow
from ballot.domain.value import (
    ArticleId,
    CommentId,
    TokenValue,
    UserId,
    VotableRef,
    VotableType,
)


class TestVote:
    """Tests for Vote entity."""

    def test_for_target_builds_unsaved_vote(self):
        target = VotableRef(votable_type=VotableType.COMMENT, votable_id=3)

        vote = Vote.for_target(UserId(1), target)

        assert vote.id is None
        assert vote.target == target
        assert vote.created_at.tzinfo is not None

    def test_is_owned_by(self):
        vote = Vote(user_id=UserId(1), votable_type=VotableType.ARTICLE, votable_id=1)

        assert vote.is_owned_by(UserId(1))
        assert not vote.is_owned_by(UserId(2))

    def test_vote_is_immutable(self):
        vote = Vote(user_id=UserId(1), votable_type=VotableType.ARTICLE, votable_id=1)

        with pytest.raises(ValidationError):
            vote.user_id = UserId(2)


class TestTargetRefs:
    """Articles and comments as vote targets."""

    def test_refs_differ_by_type_for_same_id(self):
        article = Article(id=ArticleId(5), author_id=UserId(1), title="Hello")
        comment = Comment(
            id=CommentId(5), article_id=ArticleId(1), author_id=UserId(1), body="Hi"
        )

        assert article.ref == VotableRef(
            votable_type=VotableType.ARTICLE, votable_id=5
        )
        assert comment.ref.votable_type == VotableType.COMMENT
        assert article.ref != comment.ref

    def test_unsaved_article_has_no_ref(self):
        article = Article(author_id=UserId(1), title="Draft")

        with pytest.raises(ValueError, match="not been saved"):
            article.ref


class TestToken:
    """Tests for Token entity."""

    def test_token_without_expiry_is_always_valid(self):
        token = Token(value=TokenValue("abc"), user_id=UserId(1))

        assert token.is_valid_at(utcnow() + timedelta(days=3650))

    def test_token_expires(self):
        now = utcnow()
        token = Token(
            value=TokenValue("abc"),
            user_id=UserId(1),
            expires_at=now + timedelta(minutes=5),
        )

        assert token.is_valid_at(now)
        assert not token.is_valid_at(now + timedelta(minutes=5))

    def test_blank_token_value_rejected(self):
        with pytest.raises(ValidationError):
            TokenValue("  ")
