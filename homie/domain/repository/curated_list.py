"""Curated list repository interfaces."""

from abc import ABC, abstractmethod

from homie.domain.model import CuratedList, CuratedListItem
from homie.domain.value import CuratedListId, Fid


class CuratedListRepository(ABC):
    """Repository for CuratedList entity.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, list_id: CuratedListId) -> CuratedList | None:
        """Find a list by ID."""
        pass

    @abstractmethod
    async def find_by_owner(self, fid: Fid) -> list[CuratedList]:
        """Find all lists owned by an FID, newest first."""
        pass

    @abstractmethod
    async def save(self, curated_list: CuratedList) -> CuratedList:
        """Insert a list.

        Args:
            curated_list: List without an ID

        Returns:
            The stored list with its assigned ID

        Raises:
            IntegrityError: If the owner already has a list with this name
        """
        pass

    @abstractmethod
    async def delete(self, list_id: CuratedListId, fid: Fid) -> bool:
        """Delete a list if owned by ``fid``.

        Returns:
            True if a list was deleted
        """
        pass


class CuratedListItemRepository(ABC):
    """Repository for CuratedListItem entity."""

    @abstractmethod
    async def find_by_list(self, list_id: CuratedListId) -> list[CuratedListItem]:
        """Find all items of a list, newest first."""
        pass

    @abstractmethod
    async def save(self, item: CuratedListItem) -> CuratedListItem:
        """Insert an item.

        Raises:
            IntegrityError: If the cast is already in the list
        """
        pass

    @abstractmethod
    async def delete_by_list(self, list_id: CuratedListId) -> int:
        """Remove every item of a list.

        Returns:
            Number of items removed
        """
        pass

    @abstractmethod
    async def delete(self, list_id: CuratedListId, cast_hash: str) -> bool:
        """Remove a cast from a list.

        Returns:
            True if an item was removed
        """
        pass
