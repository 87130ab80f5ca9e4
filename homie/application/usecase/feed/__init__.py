"""Read-side use cases."""

from .get_feed import GetFeedRequest, GetFeedResponse, GetFeedUseCase
from .get_notifications import (
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
)
from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase
from .get_trending import GetTrendingRequest, GetTrendingResponse, GetTrendingUseCase
from .list_channels import (
    ListChannelsRequest,
    ListChannelsResponse,
    ListChannelsUseCase,
)
from .list_friends import ListFriendsRequest, ListFriendsResponse, ListFriendsUseCase
from .search_users import SearchUsersRequest, SearchUsersResponse, SearchUsersUseCase

__all__ = [
    "GetFeedRequest",
    "GetFeedResponse",
    "GetFeedUseCase",
    "GetNotificationsRequest",
    "GetNotificationsResponse",
    "GetNotificationsUseCase",
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "GetTrendingRequest",
    "GetTrendingResponse",
    "GetTrendingUseCase",
    "ListChannelsRequest",
    "ListChannelsResponse",
    "ListChannelsUseCase",
    "ListFriendsRequest",
    "ListFriendsResponse",
    "ListFriendsUseCase",
    "SearchUsersRequest",
    "SearchUsersResponse",
    "SearchUsersUseCase",
]
