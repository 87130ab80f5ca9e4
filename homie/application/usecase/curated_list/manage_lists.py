"""Curated list use cases."""

from typing import Any

from pydantic import BaseModel

from homie.domain.error import ValidationError
from homie.domain.model import CuratedList
from homie.domain.service import CuratedListService
from homie.domain.value import CuratedListId


class GetListsRequest(BaseModel):
    """Lists owned by an FID."""

    fid: Any = None


class GetListsResponse(BaseModel):
    """Owned lists, newest first."""

    lists: list[CuratedList]


class CreateListRequest(BaseModel):
    """Create list request."""

    fid: Any = None
    list_name: str | None = None
    description: str | None = None
    is_public: bool = False


class CreateListResponse(BaseModel):
    """Create list response."""

    list: CuratedList


class DeleteListRequest(BaseModel):
    """Delete list request."""

    list_id: int | None = None
    fid: Any = None


class DeleteListResponse(BaseModel):
    """Delete list response."""

    success: bool = True


class GetListsUseCase:
    """Use case for listing a user's curated lists."""

    def __init__(self, curated_list_service: CuratedListService) -> None:
        self.curated_list_service = curated_list_service

    async def execute(self, request: GetListsRequest) -> GetListsResponse:
        lists = await self.curated_list_service.get_lists(request.fid)
        return GetListsResponse(lists=lists)


class CreateListUseCase:
    """Use case for creating a curated list."""

    def __init__(self, curated_list_service: CuratedListService) -> None:
        self.curated_list_service = curated_list_service

    async def execute(self, request: CreateListRequest) -> CreateListResponse:
        """Create the list.

        Raises:
            ValidationError: If the owner or name is missing
            DuplicateError: If the owner already has a list with this name
        """
        curated_list = await self.curated_list_service.create_list(
            fid=request.fid,
            list_name=request.list_name,
            description=request.description,
            is_public=request.is_public,
        )
        return CreateListResponse(list=curated_list)


class DeleteListUseCase:
    """Use case for deleting a curated list and all of its items."""

    def __init__(self, curated_list_service: CuratedListService) -> None:
        self.curated_list_service = curated_list_service

    async def execute(self, request: DeleteListRequest) -> DeleteListResponse:
        if request.list_id is None:
            raise ValidationError("id and fid are required", "id")
        await self.curated_list_service.delete_list(
            CuratedListId(request.list_id), request.fid
        )
        return DeleteListResponse()
