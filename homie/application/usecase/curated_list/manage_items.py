"""Curated list item use cases."""

from typing import Any

from pydantic import BaseModel

from homie.domain.model import CuratedListItem
from homie.domain.service import CuratedListService
from homie.domain.value import CuratedListId


class GetItemsRequest(BaseModel):
    """Items of a list."""

    list_id: int


class GetItemsResponse(BaseModel):
    """List items, newest first."""

    items: list[CuratedListItem]


class AddItemRequest(BaseModel):
    """Add a cast to a list."""

    list_id: int
    cast_hash: str | None = None
    added_by_fid: Any = None
    cast_data: dict[str, Any] | None = None
    notes: str | None = None


class AddItemResponse(BaseModel):
    """Add item response."""

    item: CuratedListItem


class RemoveItemRequest(BaseModel):
    """Remove a cast from a list."""

    list_id: int
    cast_hash: str | None = None


class RemoveItemResponse(BaseModel):
    """Remove item response."""

    success: bool = True


class GetItemsUseCase:
    """Use case for reading the casts saved to a list."""

    def __init__(self, curated_list_service: CuratedListService) -> None:
        self.curated_list_service = curated_list_service

    async def execute(self, request: GetItemsRequest) -> GetItemsResponse:
        items = await self.curated_list_service.get_items(
            CuratedListId(request.list_id)
        )
        return GetItemsResponse(items=items)


class AddItemUseCase:
    """Use case for saving a cast snapshot to a list."""

    def __init__(self, curated_list_service: CuratedListService) -> None:
        self.curated_list_service = curated_list_service

    async def execute(self, request: AddItemRequest) -> AddItemResponse:
        """Add the cast.

        Raises:
            ValidationError: If the cast hash or adder FID is missing
            DuplicateError: If the cast is already in the list
        """
        item = await self.curated_list_service.add_item(
            CuratedListId(request.list_id),
            cast_hash=request.cast_hash,
            added_by_fid=request.added_by_fid,
            cast_data=request.cast_data,
            notes=request.notes,
        )
        return AddItemResponse(item=item)


class RemoveItemUseCase:
    """Use case for removing a cast from a list."""

    def __init__(self, curated_list_service: CuratedListService) -> None:
        self.curated_list_service = curated_list_service

    async def execute(self, request: RemoveItemRequest) -> RemoveItemResponse:
        await self.curated_list_service.remove_item(
            CuratedListId(request.list_id), request.cast_hash
        )
        return RemoveItemResponse()
