#!/usr/bin/env python3
"""Apply curated list migrations, reporting failures to Logfire.

Usage: run_migrations.py [REVISION]   (defaults to ``head``)
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from homie.config import Settings
from homie.persistence.database import display_url
from homie.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    database = display_url(settings)

    try:
        logfire.info(
            "Starting database migrations",
            environment=settings.environment,
            database=database,
            revision=revision,
        )
        command.upgrade(Config("alembic.ini"), revision)
        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            database=database,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The deploy must stop rather than serve a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
