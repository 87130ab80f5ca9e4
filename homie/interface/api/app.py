"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from homie.config import Settings
from homie.interface.api.routes import (
    auth,
    casts,
    curated_lists,
    curation,
    feed,
    health,
    media,
    signers,
)
from homie.interface.error import register_error_handlers
from homie.util.di.container import close_container, create_container, setup_di
from homie.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_container(app)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.

    Args:
        container: DI container to use; a production container is built if omitted
    """
    settings = Settings()

    # Instrument httpx for outbound HTTP requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="HomieHouse API",
        description="Backend API for HomieHouse - a Farcaster social client",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(signers.router)
    app_instance.include_router(casts.router)
    app_instance.include_router(feed.router)
    app_instance.include_router(media.router)
    app_instance.include_router(curated_lists.router)
    app_instance.include_router(curation.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
