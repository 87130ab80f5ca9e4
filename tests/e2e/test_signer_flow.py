"""End-to-end tests for signer creation and approval polling."""

import pytest

from homie.domain.service import FarcasterApi


class TestSignerFlow:
    """Create a signer, poll it, approve it out of band, poll again."""

    @pytest.mark.asyncio
    async def test_create_poll_approve(self, client, container):
        # Create
        response = await client.post("/signer")

        assert response.status_code == 200
        created = response.json()
        assert created["ok"] is True
        assert created["status"] == "pending_approval"
        assert created["signer_approval_url"].startswith(
            "https://client.warpcast.com/deeplinks/signed-key-request"
        )
        signer_uuid = created["signer_uuid"]

        # Poll before approval
        response = await client.get("/signer", params={"signer_uuid": signer_uuid})
        assert response.status_code == 200
        assert response.json()["status"] == "pending_approval"
        assert response.json()["fid"] is None

        # The user approves in their wallet
        api = await container.get(FarcasterApi)
        api.approve(signer_uuid, 123)

        response = await client.get("/signer", params={"signer_uuid": signer_uuid})
        polled = response.json()
        assert polled["status"] == "approved"
        assert polled["fid"] == 123

    @pytest.mark.asyncio
    async def test_pending_signer_cannot_publish(self, client):
        signer_uuid = (await client.post("/signer")).json()["signer_uuid"]

        response = await client.post(
            "/privy-compose", json={"text": "gm", "signerUuid": signer_uuid}
        )

        assert response.status_code == 403
        assert response.json()["code"] == "signer_not_approved"

    @pytest.mark.asyncio
    async def test_poll_requires_uuid(self, client):
        response = await client.get("/signer")

        assert response.status_code == 400
        assert response.json()["field"] == "signer_uuid"

    @pytest.mark.asyncio
    async def test_poll_rejects_malformed_uuid(self, client):
        response = await client.get("/signer", params={"signer_uuid": "nope"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_poll_unknown_signer_relays_upstream(self, client):
        response = await client.get(
            "/signer", params={"signer_uuid": "00000000-0000-4000-8000-000000000000"}
        )

        assert response.status_code == 404
        assert response.json()["details"]["code"] == "NotFound"

    @pytest.mark.asyncio
    async def test_webhook_acknowledges(self, client):
        response = await client.post(
            "/signer/webhook",
            json={"type": "signer.approved", "data": {"token": "secret"}},
        )

        assert response.status_code == 200
        assert response.json() == {"ok": True}
