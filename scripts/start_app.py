#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logging and Logfire are configured before the app is imported so that
import-time and startup failures are recorded too.
"""

import sys

import logfire
import uvicorn

from ballot.config import Settings
from ballot.util.logging import setup_logging
from ballot.util.observability import configure_logfire

APP_FACTORY = "ballot.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting API", port=settings.port, git_sha=settings.git_sha
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Non-zero exit makes the orchestrator restart us
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
