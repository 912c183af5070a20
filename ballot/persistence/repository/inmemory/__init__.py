"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .token import InMemoryTokenRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryTokenRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
