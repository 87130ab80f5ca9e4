"""Curated list use cases."""

from .manage_items import (
    AddItemRequest,
    AddItemResponse,
    AddItemUseCase,
    GetItemsRequest,
    GetItemsResponse,
    GetItemsUseCase,
    RemoveItemRequest,
    RemoveItemResponse,
    RemoveItemUseCase,
)
from .manage_lists import (
    CreateListRequest,
    CreateListResponse,
    CreateListUseCase,
    DeleteListRequest,
    DeleteListResponse,
    DeleteListUseCase,
    GetListsRequest,
    GetListsResponse,
    GetListsUseCase,
)

__all__ = [
    "AddItemRequest",
    "AddItemResponse",
    "AddItemUseCase",
    "CreateListRequest",
    "CreateListResponse",
    "CreateListUseCase",
    "DeleteListRequest",
    "DeleteListResponse",
    "DeleteListUseCase",
    "GetItemsRequest",
    "GetItemsResponse",
    "GetItemsUseCase",
    "GetListsRequest",
    "GetListsResponse",
    "GetListsUseCase",
    "RemoveItemRequest",
    "RemoveItemResponse",
    "RemoveItemUseCase",
]
