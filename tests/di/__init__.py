"""Mock providers for testing."""

from .curation import MockCurationProvider
from .farcaster import MockFarcasterProvider
from .imgbb import MockImgbbProvider
from .neynar import MockNeynarProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockCurationProvider",
    "MockFarcasterProvider",
    "MockImgbbProvider",
    "MockNeynarProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
