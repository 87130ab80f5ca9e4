"""Feed curation preference use cases.

Responses from the preferences server are relayed as-is.
"""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import CurationService


class ListPreferencesRequest(BaseModel):
    fid: Any = None
    preference_type: str | None = None


class AddPreferenceRequest(BaseModel):
    fid: Any = None
    preference_type: str | None = None
    preference_value: str | None = None
    action: str | None = None
    priority: int | None = None


class UpdatePreferenceRequest(BaseModel):
    id: Any = None
    updates: dict[str, Any] = {}


class DeletePreferenceRequest(BaseModel):
    id: str | None = None


class ListPreferencesUseCase:
    """Use case for reading a user's curation preferences."""

    def __init__(self, curation_service: CurationService) -> None:
        self.curation_service = curation_service

    async def execute(self, request: ListPreferencesRequest) -> dict[str, Any]:
        return await self.curation_service.list_preferences(
            request.fid, request.preference_type
        )


class AddPreferenceUseCase:
    """Use case for adding a curation preference."""

    def __init__(self, curation_service: CurationService) -> None:
        self.curation_service = curation_service

    async def execute(self, request: AddPreferenceRequest) -> dict[str, Any]:
        return await self.curation_service.add_preference(
            fid=request.fid,
            preference_type=request.preference_type,
            preference_value=request.preference_value,
            action=request.action,
            priority=request.priority,
        )


class UpdatePreferenceUseCase:
    """Use case for updating a curation preference."""

    def __init__(self, curation_service: CurationService) -> None:
        self.curation_service = curation_service

    async def execute(self, request: UpdatePreferenceRequest) -> dict[str, Any]:
        return await self.curation_service.update_preference(
            request.id, request.updates
        )


class DeletePreferenceUseCase:
    """Use case for deleting a curation preference."""

    def __init__(self, curation_service: CurationService) -> None:
        self.curation_service = curation_service

    async def execute(self, request: DeletePreferenceRequest) -> dict[str, Any]:
        return await self.curation_service.delete_preference(request.id)
