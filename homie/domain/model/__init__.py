"""Domain model entities for HomieHouse."""

from homie.domain.model.cast import CastDraft, PublishedCast, Reaction
from homie.domain.model.curated_list import CuratedList, CuratedListItem
from homie.domain.model.signer import Signer

__all__ = [
    "CastDraft",
    "CuratedList",
    "CuratedListItem",
    "PublishedCast",
    "Reaction",
    "Signer",
]
