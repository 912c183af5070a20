"""Repository interfaces for the ballot domain.

Interfaces live in the domain layer; implementations live in
``ballot.persistence``.
"""

from ballot.domain.repository.article import ArticleRepository
from ballot.domain.repository.comment import CommentRepository
from ballot.domain.repository.token import TokenRepository
from ballot.domain.repository.user import UserRepository
from ballot.domain.repository.vote import VoteRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "TokenRepository",
    "UserRepository",
    "VoteRepository",
]
