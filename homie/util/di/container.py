"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from homie.config import Settings
from homie.util.di import PROVIDERS, get_provider
from homie.util.di.core import FixedSettingsProvider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        settings: Settings to use instead of loading them from the environment

    Returns:
        Configured DI container with production providers
    """
    providers: list[Provider] = [
        get_provider(base, use_mock=False)() for base in PROVIDERS
    ]
    if settings is not None:
        providers.append(FixedSettingsProvider(settings))
    # FastapiProvider supplies the Request to request-scoped factories
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    The container is stored on ``app.state.dishka_container``; see
    ``close_container`` for shutdown.
    """
    setup_dishka(container, app)


async def close_container(app: FastAPI) -> None:
    """Close the app's container, releasing the engine and HTTP resources."""
    container: AsyncContainer | None = getattr(app.state, "dishka_container", None)
    if container is not None:
        await container.close()
