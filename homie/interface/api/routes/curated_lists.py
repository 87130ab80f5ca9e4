"""Curated list routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel, ConfigDict, Field

from homie.application.usecase.curated_list import (
    AddItemRequest,
    AddItemResponse,
    AddItemUseCase,
    CreateListRequest,
    CreateListResponse,
    CreateListUseCase,
    DeleteListRequest,
    DeleteListResponse,
    DeleteListUseCase,
    GetItemsRequest,
    GetItemsResponse,
    GetItemsUseCase,
    GetListsRequest,
    GetListsResponse,
    GetListsUseCase,
    RemoveItemRequest,
    RemoveItemResponse,
    RemoveItemUseCase,
)

router = APIRouter(
    prefix="/curated-lists", tags=["curated-lists"], route_class=DishkaRoute
)


class CreateListAPIRequest(BaseModel):
    """API request for creating a curated list."""

    model_config = ConfigDict(populate_by_name=True)

    fid: Any = None
    list_name: str | None = Field(default=None, alias="listName")
    description: str | None = None
    is_public: bool = Field(default=False, alias="isPublic")


class AddItemAPIRequest(BaseModel):
    """API request for adding a cast to a list."""

    model_config = ConfigDict(populate_by_name=True)

    cast_hash: str | None = Field(default=None, alias="castHash")
    added_by_fid: Any = Field(default=None, alias="addedByFid")
    cast_data: dict[str, Any] | None = Field(default=None, alias="castData")
    notes: str | None = None


@router.get("", response_model=GetListsResponse)
async def get_lists(
    get_lists_use_case: FromDishka[GetListsUseCase],
    fid: str | None = None,
) -> GetListsResponse:
    """Get the lists owned by an FID, newest first."""
    return await get_lists_use_case.execute(GetListsRequest(fid=fid))


@router.post("", response_model=CreateListResponse)
async def create_list(
    request: CreateListAPIRequest,
    create_list_use_case: FromDishka[CreateListUseCase],
) -> CreateListResponse:
    """Create a list. Names are unique per owner."""
    return await create_list_use_case.execute(
        CreateListRequest(
            fid=request.fid,
            list_name=request.list_name,
            description=request.description,
            is_public=request.is_public,
        )
    )


@router.delete("", response_model=DeleteListResponse)
async def delete_list(
    delete_list_use_case: FromDishka[DeleteListUseCase],
    list_id: int | None = Query(default=None, alias="id"),
    fid: str | None = None,
) -> DeleteListResponse:
    """Delete a list owned by ``fid`` along with its items."""
    return await delete_list_use_case.execute(
        DeleteListRequest(list_id=list_id, fid=fid)
    )


@router.get("/{list_id}/items", response_model=GetItemsResponse)
async def get_items(
    list_id: int,
    get_items_use_case: FromDishka[GetItemsUseCase],
) -> GetItemsResponse:
    """Get the casts saved to a list, newest first."""
    return await get_items_use_case.execute(GetItemsRequest(list_id=list_id))


@router.post("/{list_id}/items", response_model=AddItemResponse)
async def add_item(
    list_id: int,
    request: AddItemAPIRequest,
    add_item_use_case: FromDishka[AddItemUseCase],
) -> AddItemResponse:
    """Save a cast snapshot to a list."""
    return await add_item_use_case.execute(
        AddItemRequest(
            list_id=list_id,
            cast_hash=request.cast_hash,
            added_by_fid=request.added_by_fid,
            cast_data=request.cast_data,
            notes=request.notes,
        )
    )


@router.delete("/{list_id}/items", response_model=RemoveItemResponse)
async def remove_item(
    list_id: int,
    remove_item_use_case: FromDishka[RemoveItemUseCase],
    cast_hash: str | None = Query(default=None, alias="castHash"),
) -> RemoveItemResponse:
    """Remove a cast from a list."""
    return await remove_item_use_case.execute(
        RemoveItemRequest(list_id=list_id, cast_hash=cast_hash)
    )
