"""In-memory repository implementations for testing."""

from .curated_list import InMemoryCuratedListItemRepository, InMemoryCuratedListRepository

__all__ = [
    "InMemoryCuratedListRepository",
    "InMemoryCuratedListItemRepository",
]
