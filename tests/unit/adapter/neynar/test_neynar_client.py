"""Unit tests for the Neynar API client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from homie.adapter.error import UpstreamError
from homie.adapter.neynar import RealNeynarClient
from homie.domain.value import ReactionType, SignerStatus
from homie.util.error import ConfigurationError

SIGNER_UUID = "8f0c0e4a-3b1d-4c5e-9f2a-6d7b8c9e0f1a"


@pytest.fixture
def client():
    return RealNeynarClient(api_key="test-key", base_url="https://api.neynar.test/")


def _patch_request(response: httpx.Response | Exception):
    """Patch httpx.AsyncClient so ``request`` returns or raises."""
    patcher = patch("httpx.AsyncClient")
    mock_client = patcher.start()
    request = AsyncMock()
    if isinstance(response, Exception):
        request.side_effect = response
    else:
        request.return_value = response
    mock_client.return_value.__aenter__.return_value.request = request
    return patcher, request


class TestSigners:
    """Tests for signer endpoints."""

    @pytest.mark.asyncio
    async def test_lookup_signer(self, client):
        patcher, request = _patch_request(
            httpx.Response(
                200,
                json={
                    "signer_uuid": SIGNER_UUID,
                    "public_key": "0xabc",
                    "status": "approved",
                    "fid": 123,
                },
            )
        )
        try:
            signer = await client.lookup_signer(SIGNER_UUID)
        finally:
            patcher.stop()

        assert signer.status == SignerStatus.APPROVED
        assert signer.fid == 123
        request.assert_called_once_with(
            "GET",
            "https://api.neynar.test/v2/farcaster/signer",
            params={"signer_uuid": SIGNER_UUID},
            json=None,
            headers={"accept": "application/json", "x-api-key": "test-key"},
            timeout=15.0,
        )

    @pytest.mark.asyncio
    async def test_register_signed_key_posts_signature(self, client):
        patcher, request = _patch_request(
            httpx.Response(
                200,
                json={
                    "signer_uuid": SIGNER_UUID,
                    "public_key": "0xabc",
                    "status": "pending_approval",
                    "signer_approval_url": "https://client.warpcast.com/deeplinks/x",
                },
            )
        )
        try:
            signer = await client.register_signed_key(SIGNER_UUID, 99, 1000, "0xsig")
        finally:
            patcher.stop()

        assert signer.status == SignerStatus.PENDING_APPROVAL
        assert signer.fid is None
        assert request.call_args.kwargs["json"] == {
            "signer_uuid": SIGNER_UUID,
            "app_fid": 99,
            "deadline": 1000,
            "signature": "0xsig",
        }

    @pytest.mark.asyncio
    async def test_missing_api_key_fails_before_request(self):
        client = RealNeynarClient(api_key=None)
        patcher, request = _patch_request(httpx.Response(200, json={}))
        try:
            with pytest.raises(ConfigurationError, match="NEYNAR__API_KEY"):
                await client.create_signer()
        finally:
            patcher.stop()

        request.assert_not_called()


class TestWrites:
    """Tests for casts and reactions."""

    @pytest.mark.asyncio
    async def test_publish_cast_unwraps_cast(self, client):
        patcher, _ = _patch_request(
            httpx.Response(200, json={"success": True, "cast": {"hash": "0xabc"}})
        )
        try:
            cast = await client.publish_cast({"signer_uuid": SIGNER_UUID, "text": "gm"})
        finally:
            patcher.stop()

        assert cast == {"hash": "0xabc"}

    @pytest.mark.asyncio
    async def test_delete_reaction_sends_body(self, client):
        patcher, request = _patch_request(httpx.Response(200, json={"success": True}))
        try:
            await client.delete_reaction(SIGNER_UUID, ReactionType.RECAST, "0x01")
        finally:
            patcher.stop()

        args, kwargs = request.call_args
        assert args[0] == "DELETE"
        assert kwargs["json"]["reaction_type"] == "recast"

    @pytest.mark.asyncio
    async def test_upstream_error_carries_body(self, client):
        body = {"message": "Signer not approved", "code": "SignerNotApproved"}
        patcher, _ = _patch_request(httpx.Response(403, json=body))
        try:
            with pytest.raises(UpstreamError) as exc_info:
                await client.publish_cast({"signer_uuid": SIGNER_UUID, "text": "gm"})
        finally:
            patcher.stop()

        assert exc_info.value.status_code == 403
        assert exc_info.value.details == body

    @pytest.mark.asyncio
    async def test_transport_failure_is_bad_gateway(self, client):
        patcher, _ = _patch_request(httpx.ConnectTimeout("timed out"))
        try:
            with pytest.raises(UpstreamError) as exc_info:
                await client.fetch_feed({"feed_type": "following", "fid": 3})
        finally:
            patcher.stop()

        assert exc_info.value.status_code == 502


class TestReads:
    """Tests for read endpoints."""

    @pytest.mark.asyncio
    async def test_unknown_username_is_none(self, client):
        patcher, _ = _patch_request(httpx.Response(404, json={"message": "not found"}))
        try:
            assert await client.fetch_user_by_username("nobody") is None
        finally:
            patcher.stop()

    @pytest.mark.asyncio
    async def test_bulk_joins_fids(self, client):
        patcher, request = _patch_request(
            httpx.Response(200, json={"users": [{"fid": 1}, {"fid": 2}]})
        )
        try:
            users = await client.fetch_users_bulk([1, 2])
        finally:
            patcher.stop()

        assert [u["fid"] for u in users] == [1, 2]
        assert request.call_args.kwargs["params"] == {"fids": "1,2"}

    @pytest.mark.asyncio
    async def test_search_unwraps_result(self, client):
        patcher, _ = _patch_request(
            httpx.Response(200, json={"result": {"users": [{"fid": 3}]}})
        )
        try:
            assert await client.search_users("dwr", 5) == [{"fid": 3}]
        finally:
            patcher.stop()

    @pytest.mark.asyncio
    async def test_notifications_use_priority_mode(self, client):
        patcher, request = _patch_request(
            httpx.Response(200, json={"notifications": [], "next": {"cursor": None}})
        )
        try:
            data = await client.fetch_notifications(3, 25)
        finally:
            patcher.stop()

        assert data["notifications"] == []
        assert request.call_args.kwargs["params"] == {
            "fid": 3,
            "limit": 25,
            "priority_mode": "true",
        }
        assert request.call_args.args[1].endswith("/v2/farcaster/notifications")
