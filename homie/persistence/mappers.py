"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from homie.domain.model import CuratedList, CuratedListItem
from homie.domain.value import CuratedListId, CuratedListItemId, Fid


def row_to_curated_list(row: Dict[str, Any]) -> CuratedList:
    """Convert database row to CuratedList domain model."""
    return CuratedList(
        id=CuratedListId(row["id"]),
        fid=Fid(row["fid"]),
        list_name=row["list_name"],
        description=row.get("description"),
        is_public=row["is_public"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def curated_list_to_dict(curated_list: CuratedList) -> Dict[str, Any]:
    """Convert CuratedList domain model to database dict.

    The ID is left out so the database assigns it.
    """
    return curated_list.model_dump(exclude={"id"})


def row_to_curated_list_item(row: Dict[str, Any]) -> CuratedListItem:
    """Convert database row to CuratedListItem domain model."""
    author = row.get("cast_author_fid")
    return CuratedListItem(
        id=CuratedListItemId(row["id"]),
        list_id=CuratedListId(row["list_id"]),
        cast_hash=row["cast_hash"],
        cast_author_fid=Fid(author) if author is not None else None,
        cast_text=row.get("cast_text"),
        cast_timestamp=row.get("cast_timestamp"),
        added_by_fid=Fid(row["added_by_fid"]),
        notes=row.get("notes"),
        created_at=row["created_at"],
    )


def curated_list_item_to_dict(item: CuratedListItem) -> Dict[str, Any]:
    """Convert CuratedListItem domain model to database dict."""
    return item.model_dump(exclude={"id"})
