"""Unit tests for the curated list use cases."""

import pytest

from homie.application.usecase.curated_list import (
    AddItemRequest,
    AddItemUseCase,
    CreateListRequest,
    CreateListUseCase,
    DeleteListRequest,
    DeleteListUseCase,
    GetItemsRequest,
    GetItemsUseCase,
)
from homie.domain.error import ValidationError
from homie.domain.service import CuratedListService
from tests.conftest import CAST_HASH
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCuratedListUseCases:
    """Tests for list and item use cases working together."""

    @pytest.mark.asyncio
    async def test_create_add_delete(self, unit_env):
        service = await unit_env.get(CuratedListService)

        created = await CreateListUseCase(service).execute(
            CreateListRequest(fid="3", list_name="  Reads  ")
        )
        list_id = created.list.id
        assert created.list.list_name == "Reads"

        added = await AddItemUseCase(service).execute(
            AddItemRequest(list_id=list_id, cast_hash=CAST_HASH, added_by_fid=3)
        )
        assert added.item.cast_hash == CAST_HASH

        deleted = await DeleteListUseCase(service).execute(
            DeleteListRequest(list_id=list_id, fid=3)
        )
        assert deleted.success is True

        items = await GetItemsUseCase(service).execute(GetItemsRequest(list_id=list_id))
        assert items.items == []

    @pytest.mark.asyncio
    async def test_delete_without_id(self, unit_env):
        service = await unit_env.get(CuratedListService)

        with pytest.raises(ValidationError) as exc_info:
            await DeleteListUseCase(service).execute(DeleteListRequest(fid=3))

        assert exc_info.value.field == "id"
