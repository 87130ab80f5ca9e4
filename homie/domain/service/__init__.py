"""Domain services."""

from .auth_service import AuthService, SiwfVerifier, TokenVerifier
from .base import Service
from .cast_service import CastService, HubSubmitter
from .curated_list_service import CuratedListService
from .curation_service import CurationService, PreferenceStore
from .farcaster_api import FarcasterApi
from .gateway_service import GatewayService
from .media_service import ImageHost, MediaService, UploadedImage
from .search_service import FeaturedAccountPolicy, UserSearchService
from .signer_service import SignerService, TypedDataSigner

__all__ = [
    "AuthService",
    "CastService",
    "CuratedListService",
    "CurationService",
    "FarcasterApi",
    "FeaturedAccountPolicy",
    "GatewayService",
    "HubSubmitter",
    "ImageHost",
    "MediaService",
    "PreferenceStore",
    "Service",
    "SignerService",
    "SiwfVerifier",
    "TokenVerifier",
    "TypedDataSigner",
    "UploadedImage",
    "UserSearchService",
]
