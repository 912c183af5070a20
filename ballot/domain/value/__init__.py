"""Domain value objects for ballot."""

from ballot.domain.value.identifiers import ArticleId, CommentId, UserId, VoteId
from ballot.domain.value.types import Handle, TokenValue, VotableRef, VotableType

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    "VoteId",
    # Types
    "Handle",
    "TokenValue",
    "VotableRef",
    "VotableType",
]
