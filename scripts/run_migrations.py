#!/usr/bin/env python3
"""Upgrade the database schema.

Usage: run_migrations.py [REVISION]   (defaults to "head")
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from ballot.config import Settings
from ballot.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    revision = argv[1] if len(argv) > 1 else "head"
    configure_logfire(Settings())

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start on a half-migrated schema
            raise

    logfire.info("Migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
