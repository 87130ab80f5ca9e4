"""Unit tests for CurationService."""

import pytest

from homie.adapter.error import UpstreamError
from homie.domain.error import ValidationError
from homie.domain.service import CurationService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPreferences:
    @pytest.mark.asyncio
    async def test_add_then_list_by_type(self, unit_env):
        service = await unit_env.get(CurationService)

        added = await service.add_preference(123, "keyword", "ai", "hide")
        await service.add_preference(123, "channel", "memes", "boost", priority=2)

        assert added["preference"]["priority"] == 0
        result = await service.list_preferences("123", "keyword")
        assert [p["preference_value"] for p in result["preferences"]] == ["ai"]

    @pytest.mark.asyncio
    async def test_missing_fields(self, unit_env):
        service = await unit_env.get(CurationService)

        with pytest.raises(ValidationError, match="Missing required fields"):
            await service.add_preference(123, "keyword", None, "hide")

    @pytest.mark.asyncio
    async def test_update_and_delete(self, unit_env):
        service = await unit_env.get(CurationService)
        added = await service.add_preference(123, "keyword", "ai", "hide")
        preference_id = added["preference"]["id"]

        updated = await service.update_preference(preference_id, {"action": "boost"})
        assert updated["preference"]["action"] == "boost"

        assert await service.delete_preference(preference_id) == {"ok": True}
        assert (await service.list_preferences(123))["preferences"] == []

    @pytest.mark.asyncio
    async def test_update_unknown_relays_upstream_error(self, unit_env):
        service = await unit_env.get(CurationService)

        with pytest.raises(UpstreamError) as exc_info:
            await service.update_preference("999", {"action": "boost"})

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_id_is_required(self, unit_env):
        service = await unit_env.get(CurationService)

        with pytest.raises(ValidationError, match="Preference ID required"):
            await service.delete_preference(None)
