"""Curated list domain service."""

from datetime import datetime
from typing import Any

import logfire
from sqlalchemy.exc import IntegrityError

from homie.domain.error import DuplicateError, NotFoundError, ValidationError
from homie.domain.model import CuratedList, CuratedListItem
from homie.domain.repository import CuratedListItemRepository, CuratedListRepository
from homie.domain.validation import (
    validate_fid,
    validate_hash,
    validate_optional_fid,
)
from homie.domain.value import CuratedListId, Fid

from .base import Service

UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """Whether an IntegrityError comes from a unique constraint.

    asyncpg reports the SQLSTATE as ``sqlstate``; some adapters use ``pgcode``.
    """
    code = getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)
    return code == UNIQUE_VIOLATION


def _parse_timestamp(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError("Invalid cast timestamp", "castData.timestamp")


class CuratedListService(Service):
    """Domain service for curated lists and their items."""

    def __init__(
        self,
        list_repository: CuratedListRepository,
        item_repository: CuratedListItemRepository,
    ) -> None:
        """Initialize curated list service.

        Args:
            list_repository: Curated list repository
            item_repository: Curated list item repository
        """
        self.list_repository = list_repository
        self.item_repository = item_repository

    async def get_lists(self, fid: Any) -> list[CuratedList]:
        """Get every list owned by an FID."""
        owner = Fid(validate_fid(fid))
        with logfire.span("curated_list_service.get_lists", fid=owner):
            lists = await self.list_repository.find_by_owner(owner)
            logfire.info("Curated lists retrieved", fid=owner, count=len(lists))
            return lists

    async def create_list(
        self,
        fid: Any,
        list_name: str | None,
        description: str | None = None,
        is_public: bool = False,
    ) -> CuratedList:
        """Create a list.

        Raises:
            ValidationError: If FID or name is missing
            DuplicateError: If the owner already has a list with this name
        """
        owner = Fid(validate_fid(fid))
        name = (list_name or "").strip()
        if not name:
            raise ValidationError("listName is required", "listName")

        with logfire.span("curated_list_service.create_list", fid=owner):
            curated_list = CuratedList(
                fid=owner,
                list_name=name,
                description=description or None,
                is_public=bool(is_public),
            )
            try:
                saved = await self.list_repository.save(curated_list)
            except IntegrityError as e:
                if not is_unique_violation(e):
                    raise
                logfire.warn("Duplicate list name", fid=owner, list_name=name)
                raise DuplicateError("List with this name already exists", "listName")

            logfire.info("Curated list created", fid=owner, list_id=saved.id)
            return saved

    async def delete_list(self, list_id: CuratedListId, fid: Any) -> None:
        """Delete a list and its items.

        Raises:
            NotFoundError: If the list does not exist or belongs to someone else
        """
        owner = Fid(validate_fid(fid))
        with logfire.span(
            "curated_list_service.delete_list", list_id=list_id, fid=owner
        ):
            existing = await self.list_repository.find_by_id(list_id)
            if existing is None or existing.fid != owner:
                raise NotFoundError("Curated list", str(list_id))

            removed = await self.item_repository.delete_by_list(list_id)
            await self.list_repository.delete(list_id, owner)
            logfire.info("Curated list deleted", list_id=list_id, items_removed=removed)

    async def get_items(self, list_id: CuratedListId) -> list[CuratedListItem]:
        """Get the items of a list, newest first."""
        with logfire.span("curated_list_service.get_items", list_id=list_id):
            items = await self.item_repository.find_by_list(list_id)
            logfire.info("Curated list items retrieved", list_id=list_id, count=len(items))
            return items

    async def add_item(
        self,
        list_id: CuratedListId,
        cast_hash: str | None,
        added_by_fid: Any,
        cast_data: dict[str, Any] | None = None,
        notes: str | None = None,
    ) -> CuratedListItem:
        """Add a cast to a list.

        Raises:
            ValidationError: If the cast hash or adder FID is missing or malformed
            NotFoundError: If the list does not exist
            DuplicateError: If the cast is already in this list
        """
        if not cast_hash:
            raise ValidationError("castHash and addedByFid are required", "castHash")
        cast_hash = validate_hash(cast_hash, "castHash")
        adder = Fid(validate_fid(added_by_fid, "addedByFid"))
        snapshot = cast_data or {}
        author = validate_optional_fid(snapshot.get("author_fid"), "castData.author_fid")
        cast_timestamp = _parse_timestamp(snapshot.get("timestamp"))

        with logfire.span(
            "curated_list_service.add_item", list_id=list_id, cast_hash=cast_hash
        ):
            if await self.list_repository.find_by_id(list_id) is None:
                raise NotFoundError("Curated list", str(list_id))

            item = CuratedListItem(
                list_id=list_id,
                cast_hash=cast_hash,
                cast_author_fid=Fid(author) if author is not None else None,
                cast_text=snapshot.get("text"),
                cast_timestamp=cast_timestamp,
                added_by_fid=adder,
                notes=notes or None,
            )
            try:
                saved = await self.item_repository.save(item)
            except IntegrityError as e:
                if not is_unique_violation(e):
                    raise
                logfire.warn(
                    "Duplicate list item", list_id=list_id, cast_hash=cast_hash
                )
                raise DuplicateError("Cast already in this list", "castHash")

            logfire.info("Cast added to list", list_id=list_id, item_id=saved.id)
            return saved

    async def remove_item(self, list_id: CuratedListId, cast_hash: str | None) -> bool:
        """Remove a cast from a list."""
        cast_hash = validate_hash(cast_hash, "castHash")

        with logfire.span(
            "curated_list_service.remove_item", list_id=list_id, cast_hash=cast_hash
        ):
            removed = await self.item_repository.delete(list_id, cast_hash)
            logfire.info("Cast removed from list", list_id=list_id, removed=removed)
            return removed
