"""Domain value objects for HomieHouse."""

from homie.domain.value.identifiers import (
    CuratedListId,
    CuratedListItemId,
    Fid,
    SignerUuid,
)
from homie.domain.value.types import (
    Embed,
    FarcasterProfile,
    FeedType,
    ReactionType,
    SignerStatus,
)

__all__ = [
    # Identifiers
    "Fid",
    "CuratedListId",
    "CuratedListItemId",
    "SignerUuid",
    # Types
    "Embed",
    "FarcasterProfile",
    "FeedType",
    "ReactionType",
    "SignerStatus",
]
