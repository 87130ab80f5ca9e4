"""Repository interfaces for the HomieHouse domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from homie.domain.repository.curated_list import (
    CuratedListItemRepository,
    CuratedListRepository,
)

__all__ = [
    "CuratedListRepository",
    "CuratedListItemRepository",
]
