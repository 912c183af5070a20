"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ballot.config import Settings
from ballot.domain.repository import (
    ArticleRepository,
    CommentRepository,
    TokenRepository,
    UserRepository,
    VoteRepository,
)
from ballot.persistence.database import create_engine, create_session_factory
from ballot.persistence.repository import (
    SqlArticleRepository,
    SqlCommentRepository,
    SqlTokenRepository,
    SqlUserRepository,
    SqlVoteRepository,
)
from ballot.util.di.base import ProviderBase
from ballot.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories for every entity. Swapped for in-memory ones in tests."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """SQL repositories over one AsyncSession per request."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine for the configured URL, disposed with the app container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One session, and one transaction, per request.

        Committed when the request scope closes. A failed commit is rolled
        back and re-raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    # Repositories take the request session in their constructor
    users = provide(SqlUserRepository, provides=UserRepository, scope=Scope.REQUEST)
    tokens = provide(
        SqlTokenRepository, provides=TokenRepository, scope=Scope.REQUEST
    )
    articles = provide(
        SqlArticleRepository, provides=ArticleRepository, scope=Scope.REQUEST
    )
    comments = provide(
        SqlCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    votes = provide(SqlVoteRepository, provides=VoteRepository, scope=Scope.REQUEST)
