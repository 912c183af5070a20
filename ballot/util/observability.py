"""Logfire setup and instrumentation.

Domain code logs and traces through ``logfire`` directly:

    with logfire.span("vote_service.cast_vote", user_id=user_id):
        logfire.info("Vote cast", vote_id=vote.id)
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ballot.config import ObservabilitySettings, Settings

SERVICE_NAME = "ballot-api"
SERVICE_VERSION = "0.1.0"

# Probes hit these constantly and tell us nothing
UNTRACED_PATHS = "/health"


def _sends_to_cloud(observability: ObservabilitySettings) -> bool:
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Data goes to Logfire cloud when OBSERVABILITY__SEND_TO_LOGFIRE says so,
    or, if that is unset, when a token is configured. Otherwise it only
    reaches the console.
    """
    observability = settings.observability
    send_to_logfire = _sends_to_cloud(observability)

    options: dict[str, Any] = dict(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    if observability.logfire_token:
        options["token"] = observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    extra = {"path": request.url.path, "method": request.method}
    if request.client:
        extra["client_host"] = request.client.host
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``.

    Headers are never recorded: the credential token travels in one.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_PATHS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run on ``engine``."""
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Span context in SQL comments
    )
