"""PostgreSQL repository implementations."""

from homie.persistence.repository.curated_list import (
    PostgresCuratedListItemRepository,
    PostgresCuratedListRepository,
)

__all__ = [
    "PostgresCuratedListRepository",
    "PostgresCuratedListItemRepository",
]
