"""Unit tests for error-to-response mapping."""

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from homie.adapter.error import UpstreamError
from homie.domain.error import AuthError, DuplicateError, NotFoundError, ValidationError
from homie.interface.error import error_body, register_error_handlers
from homie.util.error import ConfigurationError


def _app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/validation")
    async def validation():
        raise ValidationError("Cast text cannot be empty", "text")

    @app.get("/duplicate")
    async def duplicate():
        raise DuplicateError("Cast already in this list", "castHash")

    @app.get("/no-signer")
    async def no_signer():
        raise AuthError.no_signer()

    @app.get("/not-found")
    async def not_found():
        raise NotFoundError("User", "nobody")

    @app.get("/upstream/{status_code}")
    async def upstream(status_code: int):
        raise UpstreamError("neynar", status_code, {"message": "nope"})

    @app.get("/config")
    async def config():
        raise ConfigurationError("NEYNAR__API_KEY not configured")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    @app.get("/typed")
    async def typed(limit: int):
        return {"limit": limit}

    return app


@pytest_asyncio.fixture
async def client():
    transport = httpx.ASGITransport(app=_app(), raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def test_error_body_omits_empty_members():
    assert error_body("x") == {"error": "x"}
    assert error_body("x", details=[], code="c", field="f") == {
        "error": "x",
        "details": [],
        "code": "c",
        "field": "f",
    }


@pytest.mark.asyncio
async def test_validation_error(client):
    response = await client.get("/validation")

    assert response.status_code == 400
    assert response.json() == {"error": "Cast text cannot be empty", "field": "text"}


@pytest.mark.asyncio
async def test_duplicate_is_bad_request(client):
    response = await client.get("/duplicate")

    assert response.status_code == 400
    assert response.json()["field"] == "castHash"


@pytest.mark.asyncio
async def test_request_validation_error(client):
    response = await client.get("/typed", params={"limit": "many"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request"
    assert body["field"] == "limit"


@pytest.mark.asyncio
async def test_auth_error_carries_code(client):
    response = await client.get("/no-signer")

    assert response.status_code == 403
    assert response.json() == {"error": "no_signer", "code": "no_signer"}


@pytest.mark.asyncio
async def test_not_found(client):
    response = await client.get("/not-found")

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 429, 503])
async def test_upstream_status_relayed(client, status_code):
    response = await client.get(f"/upstream/{status_code}")

    assert response.status_code == status_code
    assert response.json()["details"] == {"message": "nope"}


@pytest.mark.asyncio
async def test_upstream_odd_status_is_bad_gateway(client):
    response = await client.get("/upstream/302")

    assert response.status_code == 502


@pytest.mark.asyncio
async def test_configuration_error(client):
    response = await client.get("/config")

    assert response.status_code == 500
    assert response.json()["error"] == "Server configuration error"


@pytest.mark.asyncio
async def test_unexpected_error_hides_details(client):
    response = await client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
