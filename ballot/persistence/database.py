"""Database connection and session management.

Provides the async engine and session factory. PostgreSQL (asyncpg) is the
production backend; SQLite (aiosqlite) is accepted for tests and local runs.
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ballot.config import Settings
from ballot.persistence.tables import metadata
from ballot.util.error import ConfigurationError

SUPPORTED_DRIVERS = ("postgresql+asyncpg", "sqlite+aiosqlite")


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine

    Raises:
        ConfigurationError: If the URL names an unsupported driver
    """
    url = make_url(settings.database_url)
    if url.drivername not in SUPPORTED_DRIVERS:
        raise ConfigurationError(
            f"Unsupported database driver {url.drivername!r}, "
            f"expected one of {', '.join(SUPPORTED_DRIVERS)}"
        )

    if url.drivername.startswith("sqlite"):
        engine = create_async_engine(url, echo=settings.debug)
        _serialize_sqlite_transactions(engine)
        return engine

    return create_async_engine(
        url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def _serialize_sqlite_transactions(engine: AsyncEngine) -> None:
    """Let SQLAlchemy own SQLite transactions.

    The sqlite3 driver's implicit BEGIN breaks SAVEPOINT handling, and a
    deferred BEGIN lets two writers deadlock on lock upgrade. BEGIN
    IMMEDIATE takes the write lock up front so concurrent sessions queue on
    the busy timeout instead.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_transactions(dbapi_connection: Any, connection_record: Any):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn: Any):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables directly from metadata.

    Only for throwaway databases; real deployments use the migrations.
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
