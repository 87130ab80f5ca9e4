"""Unit tests for the preferences server client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from homie.adapter.curation import MockCurationClient, RealCurationClient
from homie.adapter.error import UpstreamError


@pytest.fixture
def client():
    return RealCurationClient(server_url="http://curation.test/")


def _mock_request(mock_client, response):
    request = AsyncMock(return_value=response)
    mock_client.return_value.__aenter__.return_value.request = request
    return request


class TestRealCurationClient:
    """Tests for RealCurationClient."""

    @pytest.mark.asyncio
    async def test_list_filters_by_type(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            request = _mock_request(
                mock_client, httpx.Response(200, json={"ok": True, "preferences": []})
            )
            result = await client.list_preferences(3, "keyword")

        assert result == {"ok": True, "preferences": []}
        args, kwargs = request.call_args
        assert args == ("GET", "http://curation.test/api/curation")
        assert kwargs["params"] == {"fid": 3, "type": "keyword"}

    @pytest.mark.asyncio
    async def test_list_without_type(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            request = _mock_request(mock_client, httpx.Response(200, json={}))
            await client.list_preferences(3, None)

        assert request.call_args.kwargs["params"] == {"fid": 3}

    @pytest.mark.asyncio
    async def test_delete_passes_id(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            request = _mock_request(mock_client, httpx.Response(200, json={"ok": True}))
            await client.delete_preference("17")

        assert request.call_args.args[0] == "DELETE"
        assert request.call_args.kwargs["params"] == {"id": "17"}

    @pytest.mark.asyncio
    async def test_error_relays_body(self, client):
        body = {"ok": False, "error": "bad preference"}
        with patch("httpx.AsyncClient") as mock_client:
            _mock_request(mock_client, httpx.Response(422, json=body))

            with pytest.raises(UpstreamError) as exc_info:
                await client.add_preference({"fid": 3})

        assert exc_info.value.status_code == 422
        assert exc_info.value.details == body

    @pytest.mark.asyncio
    async def test_server_down(self, client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.request = AsyncMock(
                side_effect=httpx.ConnectError("refused")
            )

            with pytest.raises(UpstreamError) as exc_info:
                await client.update_preference({"id": "1"})

        assert exc_info.value.status_code == 502


class TestMockCurationClient:
    """Tests for MockCurationClient."""

    @pytest.mark.asyncio
    async def test_crud(self):
        store = MockCurationClient()

        added = await store.add_preference(
            {"fid": 3, "preference_type": "keyword", "value": "ai"}
        )
        preference_id = added["preference"]["id"]
        await store.update_preference({"id": preference_id, "value": "ml"})
        listed = await store.list_preferences(3, "keyword")

        assert [p["value"] for p in listed["preferences"]] == ["ml"]

        await store.delete_preference(preference_id)
        assert (await store.list_preferences(3, None))["preferences"] == []

    @pytest.mark.asyncio
    async def test_update_unknown(self):
        with pytest.raises(UpstreamError) as exc_info:
            await MockCurationClient().update_preference({"id": "404"})
        assert exc_info.value.status_code == 404
