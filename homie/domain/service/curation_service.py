"""Feed curation preferences domain service.

Preferences are owned by the internal preferences server; this service
checks required fields and forwards.
"""

from typing import Any

import logfire

from homie.domain.error import ValidationError
from homie.domain.validation import validate_fid

from .base import Service


class PreferenceStore:
    """Generic interface to the preferences server."""

    async def list_preferences(self, fid: int, preference_type: str | None) -> dict[str, Any]:
        raise NotImplementedError

    async def add_preference(self, preference: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError

    async def update_preference(self, preference: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError

    async def delete_preference(self, preference_id: str) -> dict[str, Any]:
        raise NotImplementedError


class CurationService(Service):
    """Domain service forwarding curation preference CRUD."""

    def __init__(self, preference_store: PreferenceStore) -> None:
        self.preference_store = preference_store

    async def list_preferences(self, fid: Any, preference_type: str | None = None) -> dict[str, Any]:
        owner = validate_fid(fid)
        with logfire.span("curation_service.list_preferences", fid=owner):
            return await self.preference_store.list_preferences(owner, preference_type)

    async def add_preference(
        self,
        fid: Any,
        preference_type: str | None,
        preference_value: str | None,
        action: str | None,
        priority: int | None = None,
    ) -> dict[str, Any]:
        """Create a preference.

        Raises:
            ValidationError: If any required field is missing
        """
        if not fid or not preference_type or not preference_value or not action:
            raise ValidationError("Missing required fields")
        owner = validate_fid(fid)

        with logfire.span(
            "curation_service.add_preference", fid=owner, preference_type=preference_type
        ):
            return await self.preference_store.add_preference(
                {
                    "fid": owner,
                    "preference_type": preference_type,
                    "preference_value": preference_value,
                    "action": action,
                    "priority": priority or 0,
                }
            )

    async def update_preference(self, preference_id: Any, updates: dict[str, Any]) -> dict[str, Any]:
        if not preference_id:
            raise ValidationError("Preference ID required", "id")
        with logfire.span("curation_service.update_preference", preference_id=preference_id):
            return await self.preference_store.update_preference(
                {"id": preference_id, **updates}
            )

    async def delete_preference(self, preference_id: str | None) -> dict[str, Any]:
        if not preference_id:
            raise ValidationError("Preference ID required", "id")
        with logfire.span("curation_service.delete_preference", preference_id=preference_id):
            return await self.preference_store.delete_preference(preference_id)
