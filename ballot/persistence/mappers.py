"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ballot.domain.model import Article, Comment, Token, User, Vote
from ballot.domain.value import (
    ArticleId,
    CommentId,
    Handle,
    TokenValue,
    UserId,
    VotableType,
    VoteId,
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive timestamps (SQLite drops the offset)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _without_id(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop an unset id so the database assigns one."""
    if values.get("id") is None:
        values.pop("id", None)
    return values


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        handle=Handle(row["handle"]),
        created_at=_as_utc(row["created_at"]),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return _without_id(user.model_dump())


def row_to_token(row: Dict[str, Any]) -> Token:
    """Convert database row to Token domain model."""
    return Token(
        value=TokenValue(row["value"]),
        user_id=UserId(row["user_id"]),
        created_at=_as_utc(row["created_at"]),
        expires_at=_as_utc(row.get("expires_at")),
    )


def token_to_dict(token: Token) -> Dict[str, Any]:
    """Convert Token domain model to database dict."""
    return token.model_dump()


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model."""
    return Article(
        id=ArticleId(row["id"]),
        author_id=UserId(row["author_id"]),
        title=row["title"],
        created_at=_as_utc(row["created_at"]),
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    return _without_id(article.model_dump())


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        article_id=ArticleId(row["article_id"]),
        author_id=UserId(row["author_id"]),
        body=row["body"],
        created_at=_as_utc(row["created_at"]),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return _without_id(comment.model_dump())


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        votable_type=VotableType(row["votable_type"]),
        votable_id=row["votable_id"],
        created_at=_as_utc(row["created_at"]),
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion (without id)
    """
    values = _without_id(vote.model_dump())
    values["votable_type"] = vote.votable_type.value
    return values
