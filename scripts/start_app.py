#!/usr/bin/env python3
"""Run the HomieHouse API under uvicorn.

Logging and Logfire are configured before the app module is imported, so a
failure while building the container is reported with full context.
"""

import sys

import logfire
import uvicorn

from homie.config import Settings
from homie.util.logging import setup_logging
from homie.util.observability import configure_logfire

APP = "homie.interface.api.app:app"


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    missing = [name for name, ok in settings.integrations.items() if not ok]
    if missing:
        # Routes behind these integrations answer 500 until the keys are set
        logfire.warn("Starting without credentials", missing=missing)

    try:
        logfire.info(
            "Starting HomieHouse API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
            hub=settings.hub.url,
        )
        uvicorn.run(
            APP,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
        return 0
    except Exception as e:
        logfire.error(
            "HomieHouse API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
