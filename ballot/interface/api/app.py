"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ballot.config import Settings
from ballot.interface.api.errors import register_error_handlers
from ballot.interface.api.routes import health, votes
from ballot.util.di.container import create_container, setup_di
from ballot.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; the start
    script does it in production.

    Args:
        settings: Settings to use instead of reading the environment
        container: DI container to use instead of the production one
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Ballot API",
        description="Votes on articles and comments",
        version="0.1.0",
    )

    if settings.environment != "test":
        instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", settings.auth.token_header],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)

    return app_instance
