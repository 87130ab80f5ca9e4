"""Feed curation preference routes.

Everything here is forwarded to the internal preferences server and its
response relayed unchanged.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Query
from pydantic import BaseModel

from homie.application.usecase.curation import (
    AddPreferenceRequest,
    AddPreferenceUseCase,
    DeletePreferenceRequest,
    DeletePreferenceUseCase,
    ListPreferencesRequest,
    ListPreferencesUseCase,
    UpdatePreferenceRequest,
    UpdatePreferenceUseCase,
)

router = APIRouter(prefix="/curation", tags=["curation"], route_class=DishkaRoute)


class AddPreferenceAPIRequest(BaseModel):
    """API request for adding a preference."""

    fid: Any = None
    preference_type: str | None = None
    preference_value: str | None = None
    action: str | None = None
    priority: int | None = None


@router.get("")
async def list_preferences(
    list_preferences_use_case: FromDishka[ListPreferencesUseCase],
    fid: str | None = None,
    preference_type: str | None = Query(default=None, alias="type"),
) -> dict[str, Any]:
    """List a user's preferences, optionally of one type."""
    return await list_preferences_use_case.execute(
        ListPreferencesRequest(fid=fid, preference_type=preference_type)
    )


@router.post("")
async def add_preference(
    request: AddPreferenceAPIRequest,
    add_preference_use_case: FromDishka[AddPreferenceUseCase],
) -> dict[str, Any]:
    """Add a preference."""
    return await add_preference_use_case.execute(
        AddPreferenceRequest(**request.model_dump())
    )


@router.put("")
async def update_preference(
    update_preference_use_case: FromDishka[UpdatePreferenceUseCase],
    body: dict[str, Any] | None = Body(default=None),
) -> dict[str, Any]:
    """Update a preference; every field other than ``id`` is forwarded as-is."""
    updates = dict(body or {})
    preference_id = updates.pop("id", None)
    return await update_preference_use_case.execute(
        UpdatePreferenceRequest(id=preference_id, updates=updates)
    )


@router.delete("")
async def delete_preference(
    delete_preference_use_case: FromDishka[DeletePreferenceUseCase],
    preference_id: str | None = Query(default=None, alias="id"),
) -> dict[str, Any]:
    """Delete a preference."""
    return await delete_preference_use_case.execute(
        DeletePreferenceRequest(id=preference_id)
    )
