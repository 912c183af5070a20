"""Mock persistence providers for testing."""

from dishka import Scope, provide

from ballot.domain.repository import (
    ArticleRepository,
    CommentRepository,
    TokenRepository,
    UserRepository,
    VoteRepository,
)
from ballot.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryTokenRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from ballot.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data seeded in one request is visible to the next,
    the way a database would be. Each test builds its own container, which
    keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_token_repository(self) -> TokenRepository:
        """Provide in-memory token repository."""
        return InMemoryTokenRepository()

    @provide(scope=Scope.APP)
    def get_article_repository(self) -> ArticleRepository:
        """Provide in-memory article repository."""
        return InMemoryArticleRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()
