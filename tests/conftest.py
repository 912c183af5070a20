"""Test configuration and fixtures."""

from datetime import timedelta
from typing import Optional

import logfire
from dishka import AsyncContainer

from ballot.domain.model import Article, Comment, Token, User
from ballot.domain.model.common import utcnow
from ballot.domain.repository import (
    ArticleRepository,
    CommentRepository,
    TokenRepository,
    UserRepository,
)
from ballot.domain.value import ArticleId, Handle, TokenValue, UserId


def pytest_configure(config):
    # Spans and logs stay in-process during tests
    logfire.configure(send_to_logfire=False, console=False)


async def make_user(
    container: AsyncContainer,
    handle: str,
    token: Optional[str] = None,
    expires_in: Optional[timedelta] = None,
) -> User:
    """Helper function to store a user and, optionally, a token for them.

    Args:
        container: Request-scoped container to take repositories from
        handle: Handle for the new user
        token: Token value to issue to the user
        expires_in: Token lifetime; negative for an already expired token

    Returns:
        Saved user with its id
    """
    user_repo = await container.get(UserRepository)
    user = await user_repo.save(User(handle=Handle(handle)))

    if token is not None:
        token_repo = await container.get(TokenRepository)
        expires_at = utcnow() + expires_in if expires_in is not None else None
        await token_repo.save(
            Token(value=TokenValue(token), user_id=user.id, expires_at=expires_at)
        )

    return user


async def make_article(
    container: AsyncContainer, author_id: UserId, title: str = "Test Article"
) -> Article:
    """Helper function to store an article."""
    article_repo = await container.get(ArticleRepository)
    return await article_repo.save(Article(author_id=author_id, title=title))


async def make_comment(
    container: AsyncContainer,
    article_id: ArticleId,
    author_id: UserId,
    body: str = "Test comment",
) -> Comment:
    """Helper function to store a comment."""
    comment_repo = await container.get(CommentRepository)
    return await comment_repo.save(
        Comment(article_id=article_id, author_id=author_id, body=body)
    )
