"""Neynar hosted Farcaster API client.

Every call is a single request with an explicit timeout. Non-2xx responses
are raised as ``UpstreamError`` carrying the upstream body verbatim.
"""

import secrets
import uuid
from typing import Any

import httpx
import logfire

from homie.adapter.error import UpstreamError
from homie.domain.model import Signer
from homie.domain.service.farcaster_api import FarcasterApi
from homie.domain.value import Fid, ReactionType, SignerStatus, SignerUuid
from homie.util.error import ConfigurationError
from homie.util.redact import truncate_id

SERVICE_NAME = "neynar"


def _signer_from_response(data: dict[str, Any]) -> Signer:
    fid = data.get("fid")
    return Signer(
        signer_uuid=SignerUuid(data["signer_uuid"]),
        public_key=data.get("public_key") or "",
        status=SignerStatus(data.get("status", SignerStatus.GENERATED.value)),
        fid=Fid(int(fid)) if fid else None,
        signer_approval_url=data.get("signer_approval_url"),
    )


def _error_details(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class NeynarClient(FarcasterApi):
    """Base class for Neynar clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealNeynarClient(NeynarClient):
    """Neynar v2 API client."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api.neynar.com",
        timeout: float = 15.0,
    ) -> None:
        """Initialize Neynar client.

        Args:
            api_key: Neynar API key (checked on first use)
            base_url: API root
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            logfire.error("Neynar API key not configured")
            raise ConfigurationError("NEYNAR__API_KEY not configured")
        return {"accept": "application/json", "x-api-key": self.api_key}

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        allow_not_found: bool = False,
    ) -> dict[str, Any] | None:
        """Send one request to the v2 Farcaster API.

        Args:
            method: HTTP method
            path: Path below ``/v2/farcaster``
            params: Query parameters
            json: JSON body
            allow_not_found: Return None instead of raising on 404

        Raises:
            ConfigurationError: If the API key is missing
            UpstreamError: On any non-2xx response or transport failure
        """
        headers = self._headers()
        url = f"{self.base_url}/v2/farcaster{path}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Neynar HTTP error", path=path, error=str(e))
            raise UpstreamError(SERVICE_NAME, 502, str(e))

        if allow_not_found and response.status_code == 404:
            return None

        if not response.is_success:
            details = _error_details(response)
            logfire.error(
                "Neynar request failed",
                method=method,
                path=path,
                status_code=response.status_code,
                error=details,
            )
            raise UpstreamError(SERVICE_NAME, response.status_code, details)

        if not response.content:
            return {}
        return response.json()

    # Signers

    async def create_signer(self) -> Signer:
        data = await self._request("POST", "/signer")
        return _signer_from_response(data)

    async def register_signed_key(
        self, signer_uuid: str, app_fid: int, deadline: int, signature: str
    ) -> Signer:
        data = await self._request(
            "POST",
            "/signer/signed_key",
            json={
                "signer_uuid": signer_uuid,
                "app_fid": app_fid,
                "deadline": deadline,
                "signature": signature,
            },
        )
        return _signer_from_response(data)

    async def lookup_signer(self, signer_uuid: str) -> Signer:
        data = await self._request(
            "GET", "/signer", params={"signer_uuid": signer_uuid}
        )
        return _signer_from_response(data)

    # Writes

    async def publish_cast(self, payload: dict[str, Any]) -> dict[str, Any]:
        data = await self._request("POST", "/cast", json=payload)
        return data.get("cast") or {}

    async def publish_reaction(
        self, signer_uuid: str, reaction_type: ReactionType, target: str
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/reaction",
            json={
                "signer_uuid": signer_uuid,
                "reaction_type": reaction_type.value,
                "target": target,
            },
        )

    async def delete_reaction(
        self, signer_uuid: str, reaction_type: ReactionType, target: str
    ) -> dict[str, Any]:
        return await self._request(
            "DELETE",
            "/reaction",
            json={
                "signer_uuid": signer_uuid,
                "reaction_type": reaction_type.value,
                "target": target,
            },
        )

    # Reads

    async def fetch_feed(self, params: dict[str, Any]) -> dict[str, Any]:
        return await self._request("GET", "/feed", params=params)

    async def fetch_trending(self, params: dict[str, Any]) -> dict[str, Any]:
        return await self._request("GET", "/feed/trending", params=params)

    async def fetch_notifications(self, fid: int, limit: int) -> dict[str, Any]:
        return await self._request(
            "GET",
            "/notifications",
            params={"fid": fid, "limit": limit, "priority_mode": "true"},
        )

    async def fetch_user_channels(self, fid: int, limit: int) -> dict[str, Any]:
        return await self._request(
            "GET", "/channel/user", params={"fid": fid, "limit": limit}
        )

    async def fetch_channel_list(self, limit: int) -> dict[str, Any]:
        return await self._request("GET", "/channel/list", params={"limit": limit})

    async def fetch_following(self, fid: int, limit: int) -> dict[str, Any]:
        return await self._request(
            "GET", "/following", params={"fid": fid, "limit": limit}
        )

    async def fetch_user_by_username(self, username: str) -> dict[str, Any] | None:
        data = await self._request(
            "GET",
            "/user/by_username",
            params={"username": username},
            allow_not_found=True,
        )
        if data is None:
            return None
        return data.get("user")

    async def fetch_users_bulk(self, fids: list[int]) -> list[dict[str, Any]]:
        data = await self._request(
            "GET", "/user/bulk", params={"fids": ",".join(str(f) for f in fids)}
        )
        return data.get("users") or []

    async def fetch_user_casts(self, fid: int, limit: int) -> dict[str, Any]:
        return await self._request(
            "GET", "/feed/user/casts", params={"fid": fid, "limit": limit}
        )

    async def search_users(self, query: str, limit: int) -> list[dict[str, Any]]:
        data = await self._request(
            "GET", "/user/search", params={"q": query, "limit": limit}
        )
        return (data.get("result") or {}).get("users") or []


class MockNeynarClient(NeynarClient):
    """Mock Neynar client for testing.

    Keeps signers, casts and reactions in memory. Signer approval happens
    out of band, so tests drive it with ``approve()``.
    """

    APPROVAL_URL = "https://client.warpcast.com/deeplinks/signed-key-request"

    def __init__(
        self,
        approved_signers: dict[str, int] | None = None,
        users: list[dict[str, Any]] | None = None,
    ):
        """Initialize mock client.

        Args:
            approved_signers: Signer UUIDs that start out approved, mapped to their FID
            users: Users served by the read endpoints
        """
        self.signers: dict[str, Signer] = {}
        self.casts: list[dict[str, Any]] = []
        self.payloads: list[dict[str, Any]] = []
        self.reactions: set[tuple[str, str, str]] = set()
        self.users: list[dict[str, Any]] = list(users or [])

        for signer_uuid, fid in (approved_signers or {}).items():
            self.signers[signer_uuid] = Signer(
                signer_uuid=SignerUuid(signer_uuid),
                public_key=f"0x{secrets.token_hex(32)}",
                status=SignerStatus.APPROVED,
                fid=Fid(fid),
            )

    def approve(self, signer_uuid: str, fid: int) -> Signer:
        """Simulate the user approving the key request in their wallet."""
        signer = self.signers[signer_uuid].model_copy(
            update={"status": SignerStatus.APPROVED, "fid": Fid(fid)}
        )
        self.signers[signer_uuid] = signer
        return signer

    def revoke(self, signer_uuid: str) -> Signer:
        signer = self.signers[signer_uuid].model_copy(
            update={"status": SignerStatus.REVOKED}
        )
        self.signers[signer_uuid] = signer
        return signer

    def _get_signer(self, signer_uuid: str) -> Signer:
        signer = self.signers.get(signer_uuid)
        if signer is None:
            raise UpstreamError(
                SERVICE_NAME, 404, {"message": "Signer not found", "code": "NotFound"}
            )
        return signer

    def _get_user(self, fid: int) -> dict[str, Any] | None:
        return next((u for u in self.users if u.get("fid") == fid), None)

    # Signers

    async def create_signer(self) -> Signer:
        signer = Signer(
            signer_uuid=SignerUuid(str(uuid.uuid4())),
            public_key=f"0x{secrets.token_hex(32)}",
            status=SignerStatus.GENERATED,
        )
        self.signers[signer.signer_uuid] = signer
        return signer

    async def register_signed_key(
        self, signer_uuid: str, app_fid: int, deadline: int, signature: str
    ) -> Signer:
        signer = self._get_signer(signer_uuid).model_copy(
            update={
                "status": SignerStatus.PENDING_APPROVAL,
                "signer_approval_url": f"{self.APPROVAL_URL}?token={secrets.token_hex(8)}",
            }
        )
        self.signers[signer_uuid] = signer
        logfire.info(
            "Mock signer registered", signer_uuid=truncate_id(signer_uuid), app_fid=app_fid
        )
        return signer

    async def lookup_signer(self, signer_uuid: str) -> Signer:
        return self._get_signer(signer_uuid)

    # Writes

    async def publish_cast(self, payload: dict[str, Any]) -> dict[str, Any]:
        signer = self._get_signer(payload["signer_uuid"])
        cast = {
            "hash": f"0x{secrets.token_hex(20)}",
            "author": {"fid": signer.fid},
            "text": payload["text"],
        }
        self.casts.append(cast)
        self.payloads.append(payload)
        return cast

    async def publish_reaction(
        self, signer_uuid: str, reaction_type: ReactionType, target: str
    ) -> dict[str, Any]:
        self._get_signer(signer_uuid)
        self.reactions.add((signer_uuid, reaction_type.value, target))
        return {"success": True}

    async def delete_reaction(
        self, signer_uuid: str, reaction_type: ReactionType, target: str
    ) -> dict[str, Any]:
        self._get_signer(signer_uuid)
        self.reactions.discard((signer_uuid, reaction_type.value, target))
        return {"success": True}

    # Reads

    async def fetch_feed(self, params: dict[str, Any]) -> dict[str, Any]:
        limit = params.get("limit", 25)
        return {"casts": self.casts[:limit], "next": {"cursor": None}}

    async def fetch_trending(self, params: dict[str, Any]) -> dict[str, Any]:
        limit = params.get("limit", 10)
        return {"casts": self.casts[:limit], "next": {"cursor": None}}

    async def fetch_notifications(self, fid: int, limit: int) -> dict[str, Any]:
        # casts by other users stand in for mention notifications
        notifications = [
            {"type": "mention", "cast": cast}
            for cast in self.casts
            if cast["author"]["fid"] != fid
        ]
        return {"notifications": notifications[:limit], "next": {"cursor": None}}

    async def fetch_user_channels(self, fid: int, limit: int) -> dict[str, Any]:
        return {"channels": [{"id": "homiehouse", "name": "HomieHouse"}][:limit]}

    async def fetch_channel_list(self, limit: int) -> dict[str, Any]:
        channels = [
            {"id": "homiehouse", "name": "HomieHouse"},
            {"id": "farcaster", "name": "Farcaster"},
        ]
        return {"channels": channels[:limit]}

    async def fetch_following(self, fid: int, limit: int) -> dict[str, Any]:
        return {"users": [{"object": "follow", "user": u} for u in self.users[:limit]]}

    async def fetch_user_by_username(self, username: str) -> dict[str, Any] | None:
        return next(
            (u for u in self.users if u.get("username") == username.lower()), None
        )

    async def fetch_users_bulk(self, fids: list[int]) -> list[dict[str, Any]]:
        return [u for u in (self._get_user(fid) for fid in fids) if u is not None]

    async def fetch_user_casts(self, fid: int, limit: int) -> dict[str, Any]:
        casts = [c for c in self.casts if c["author"]["fid"] == fid]
        return {"casts": casts[:limit], "next": {"cursor": None}}

    async def search_users(self, query: str, limit: int) -> list[dict[str, Any]]:
        needle = query.lower()
        matches = [
            u
            for u in self.users
            if needle in (u.get("username") or "")
            or needle in (u.get("display_name") or "").lower()
        ]
        return matches[:limit]
