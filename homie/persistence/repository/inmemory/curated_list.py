"""In-memory curated list repositories for testing."""

from itertools import count

from sqlalchemy.exc import IntegrityError

from homie.domain.model import CuratedList, CuratedListItem
from homie.domain.repository import CuratedListItemRepository, CuratedListRepository
from homie.domain.value import CuratedListId, CuratedListItemId, Fid


class UniqueViolation(Exception):
    """Driver error raised for a duplicate key, as asyncpg reports it."""

    sqlstate = "23505"


class InMemoryCuratedListRepository(CuratedListRepository):
    """In-memory implementation of CuratedListRepository for testing."""

    def __init__(self) -> None:
        self._lists: list[CuratedList] = []
        self._ids = count(1)

    async def find_by_id(self, list_id: CuratedListId) -> CuratedList | None:
        """Find a list by ID."""
        for curated_list in self._lists:
            if curated_list.id == list_id:
                return curated_list
        return None

    async def find_by_owner(self, fid: Fid) -> list[CuratedList]:
        """Find all lists owned by an FID, newest first."""
        owned = [c for c in self._lists if c.fid == fid]
        return sorted(owned, key=lambda c: c.created_at, reverse=True)

    async def save(self, curated_list: CuratedList) -> CuratedList:
        """Insert a list.

        Raises:
            IntegrityError: If the owner already has a list with this name
        """
        for existing in self._lists:
            if (
                existing.fid == curated_list.fid
                and existing.list_name == curated_list.list_name
            ):
                raise IntegrityError("Duplicate list name", None, UniqueViolation())

        saved = curated_list.model_copy(
            update={"id": CuratedListId(next(self._ids))}
        )
        self._lists.append(saved)
        return saved

    async def delete(self, list_id: CuratedListId, fid: Fid) -> bool:
        """Delete a list if owned by ``fid``."""
        before = len(self._lists)
        self._lists = [
            c for c in self._lists if not (c.id == list_id and c.fid == fid)
        ]
        return len(self._lists) < before


class InMemoryCuratedListItemRepository(CuratedListItemRepository):
    """In-memory implementation of CuratedListItemRepository for testing."""

    def __init__(self) -> None:
        self._items: list[CuratedListItem] = []
        self._ids = count(1)

    async def find_by_list(self, list_id: CuratedListId) -> list[CuratedListItem]:
        """Find all items of a list, newest first."""
        items = [i for i in self._items if i.list_id == list_id]
        return sorted(items, key=lambda i: i.created_at, reverse=True)

    async def save(self, item: CuratedListItem) -> CuratedListItem:
        """Insert an item.

        Raises:
            IntegrityError: If the cast is already in the list
        """
        for existing in self._items:
            if existing.list_id == item.list_id and existing.cast_hash == item.cast_hash:
                raise IntegrityError("Duplicate list item", None, UniqueViolation())

        saved = item.model_copy(update={"id": CuratedListItemId(next(self._ids))})
        self._items.append(saved)
        return saved

    async def delete_by_list(self, list_id: CuratedListId) -> int:
        """Remove every item of a list."""
        before = len(self._items)
        self._items = [i for i in self._items if i.list_id != list_id]
        return before - len(self._items)

    async def delete(self, list_id: CuratedListId, cast_hash: str) -> bool:
        """Remove a cast from a list."""
        before = len(self._items)
        self._items = [
            i
            for i in self._items
            if not (i.list_id == list_id and i.cast_hash == cast_hash)
        ]
        return len(self._items) < before
