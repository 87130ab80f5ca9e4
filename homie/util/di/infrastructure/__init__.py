"""Infrastructure providers."""

# Import bases
from .curation import CurationProvider
from .farcaster import FarcasterProvider
from .imgbb import ImgbbProvider
from .neynar import NeynarProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .curation import ProdCurationProvider  # noqa: F401
from .farcaster import ProdFarcasterProvider  # noqa: F401
from .imgbb import ProdImgbbProvider  # noqa: F401
from .neynar import ProdNeynarProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "CurationProvider",
    "FarcasterProvider",
    "ImgbbProvider",
    "NeynarProvider",
    "PersistenceProvider",
    "ProdCurationProvider",
    "ProdFarcasterProvider",
    "ProdImgbbProvider",
    "ProdNeynarProvider",
    "ProdPersistenceProvider",
]
