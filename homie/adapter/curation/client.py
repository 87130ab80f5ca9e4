"""Client for the internal feed-curation preferences server."""

from itertools import count
from typing import Any

import httpx
import logfire

from homie.adapter.error import UpstreamError
from homie.domain.service.curation_service import PreferenceStore

SERVICE_NAME = "curation"


class CurationClient(PreferenceStore):
    """Base class for preference server clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealCurationClient(CurationClient):
    """Forwards preference CRUD to ``{server_url}/api/curation``."""

    def __init__(self, server_url: str, timeout: float = 10.0) -> None:
        self.endpoint = f"{server_url.rstrip('/')}/api/curation"
        self.timeout = timeout

    async def _request(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.request(
                    method, self.endpoint, params=params, json=json, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Preferences server HTTP error", method=method, error=str(e))
            raise UpstreamError(SERVICE_NAME, 502, str(e))

        try:
            data = response.json()
        except ValueError:
            data = response.text

        if not response.is_success:
            logfire.error(
                "Preferences server request failed",
                method=method,
                status_code=response.status_code,
            )
            raise UpstreamError(SERVICE_NAME, response.status_code, data)

        return data

    async def list_preferences(
        self, fid: int, preference_type: str | None
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"fid": fid}
        if preference_type:
            params["type"] = preference_type
        return await self._request("GET", params=params)

    async def add_preference(self, preference: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", json=preference)

    async def update_preference(self, preference: dict[str, Any]) -> dict[str, Any]:
        return await self._request("PUT", json=preference)

    async def delete_preference(self, preference_id: str) -> dict[str, Any]:
        return await self._request("DELETE", params={"id": preference_id})


class MockCurationClient(CurationClient):
    """In-memory preference store for testing."""

    def __init__(self):
        self.preferences: dict[str, dict[str, Any]] = {}
        self._ids = count(1)

    async def list_preferences(
        self, fid: int, preference_type: str | None
    ) -> dict[str, Any]:
        preferences = [
            p
            for p in self.preferences.values()
            if p["fid"] == fid
            and (preference_type is None or p["preference_type"] == preference_type)
        ]
        return {"ok": True, "preferences": preferences}

    async def add_preference(self, preference: dict[str, Any]) -> dict[str, Any]:
        preference_id = str(next(self._ids))
        stored = {"id": preference_id, **preference}
        self.preferences[preference_id] = stored
        return {"ok": True, "preference": stored}

    async def update_preference(self, preference: dict[str, Any]) -> dict[str, Any]:
        preference_id = str(preference["id"])
        if preference_id not in self.preferences:
            raise UpstreamError(SERVICE_NAME, 404, {"ok": False, "error": "Not found"})
        self.preferences[preference_id].update(preference)
        return {"ok": True, "preference": self.preferences[preference_id]}

    async def delete_preference(self, preference_id: str) -> dict[str, Any]:
        self.preferences.pop(str(preference_id), None)
        return {"ok": True}
