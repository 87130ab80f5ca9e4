"""Fixtures for end-to-end API tests.

Each test gets its own mocked container, so in-memory state (signers,
curated lists, uploads) never leaks between tests.
"""

import httpx
import pytest_asyncio

from homie.interface.api.app import create_app
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    """App-scoped test container backing the API under test."""
    container = build_test_container()
    yield container
    await container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client talking to the app in-process."""
    app = create_app(container=container)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://homiehouse.xyz"
    ) as client:
        yield client
