"""Curated list entities.

Curated lists are user-owned collections of casts. Items snapshot the
cast author, text and timestamp at the time they were added.
"""

from datetime import datetime, timezone

from pydantic import Field

from homie.domain.model.common import DomainModel
from homie.domain.value import CuratedListId, CuratedListItemId, Fid


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CuratedList(DomainModel):
    """Named list of casts owned by an FID.

    Business rules:
    - list names are unique per owner (enforced by database unique constraint)
    """

    id: CuratedListId | None = None
    fid: Fid
    list_name: str
    description: str | None = None
    is_public: bool = False
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class CuratedListItem(DomainModel):
    """Cast saved to a curated list.

    Business rules:
    - a cast appears at most once per list (enforced by database unique constraint)
    """

    id: CuratedListItemId | None = None
    list_id: CuratedListId
    cast_hash: str
    cast_author_fid: Fid | None = None
    cast_text: str | None = None
    cast_timestamp: datetime | None = None
    added_by_fid: Fid
    notes: str | None = None
    created_at: datetime = Field(default_factory=_now)
