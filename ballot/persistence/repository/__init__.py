"""SQL repository implementations."""

from ballot.persistence.repository.article import SqlArticleRepository
from ballot.persistence.repository.comment import SqlCommentRepository
from ballot.persistence.repository.token import SqlTokenRepository
from ballot.persistence.repository.user import SqlUserRepository
from ballot.persistence.repository.vote import SqlVoteRepository

__all__ = [
    "SqlArticleRepository",
    "SqlCommentRepository",
    "SqlTokenRepository",
    "SqlUserRepository",
    "SqlVoteRepository",
]
