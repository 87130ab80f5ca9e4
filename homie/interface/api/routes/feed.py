"""Read proxy routes: feeds, channels, friends, profiles, trending, search
and notifications.

Query parameters are taken as raw strings and normalized by the domain
validators, so a malformed ``limit`` falls back to its default instead of
failing the request.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from homie.application.usecase.feed import (
    GetFeedRequest,
    GetFeedResponse,
    GetFeedUseCase,
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    GetTrendingRequest,
    GetTrendingResponse,
    GetTrendingUseCase,
    ListChannelsRequest,
    ListChannelsResponse,
    ListChannelsUseCase,
    ListFriendsRequest,
    ListFriendsResponse,
    ListFriendsUseCase,
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
)
from homie.domain.service import AuthService
from homie.domain.service.auth_service import extract_bearer_token

router = APIRouter(tags=["feed"], route_class=DishkaRoute)


@router.get("/feed", response_model=GetFeedResponse)
async def get_feed(
    get_feed_use_case: FromDishka[GetFeedUseCase],
    auth_service: FromDishka[AuthService],
    feed_type: str | None = None,
    fid: str | None = None,
    channel: str | None = None,
    limit: str | None = None,
    authorization: str | None = Header(default=None),
) -> GetFeedResponse:
    """Get a home or channel feed.

    Without ``fid`` the feed of the bearer token's user is returned.
    """
    viewer_fid = await auth_service.resolve_optional_fid(
        extract_bearer_token(authorization)
    )
    return await get_feed_use_case.execute(
        GetFeedRequest(
            feed_type=feed_type,
            fid=fid,
            channel=channel,
            limit=limit,
            viewer_fid=viewer_fid,
        )
    )


@router.get("/channels", response_model=ListChannelsResponse)
async def list_channels(
    list_channels_use_case: FromDishka[ListChannelsUseCase],
    fid: str | None = None,
    limit: str | None = None,
) -> ListChannelsResponse:
    """List a user's channels, or popular channels without ``fid``."""
    return await list_channels_use_case.execute(
        ListChannelsRequest(fid=fid, limit=limit)
    )


@router.get("/friends", response_model=ListFriendsResponse)
async def list_friends(
    list_friends_use_case: FromDishka[ListFriendsUseCase],
    fid: str | None = None,
) -> ListFriendsResponse:
    """List followed accounts with a verified Ethereum address."""
    return await list_friends_use_case.execute(ListFriendsRequest(fid=fid))


@router.get("/profile", response_model=GetProfileResponse)
async def get_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    fid: str | None = None,
    username: str | None = None,
    casts: bool = False,
    limit: str | None = None,
) -> GetProfileResponse:
    """Look up a profile by username or FID."""
    return await get_profile_use_case.execute(
        GetProfileRequest(fid=fid, username=username, casts=casts, casts_limit=limit)
    )


@router.get("/trending", response_model=GetTrendingResponse)
async def get_trending(
    get_trending_use_case: FromDishka[GetTrendingUseCase],
    limit: str | None = None,
    time_window: str | None = None,
    viewer_fid: str | None = None,
    channel_id: str | None = None,
) -> GetTrendingResponse:
    """Get trending casts, at most ten per page."""
    return await get_trending_use_case.execute(
        GetTrendingRequest(
            limit=limit,
            time_window=time_window,
            channel_id=channel_id,
            viewer_fid=viewer_fid,
        )
    )


@router.get("/notifications", response_model=GetNotificationsResponse)
async def get_notifications(
    get_notifications_use_case: FromDishka[GetNotificationsUseCase],
    fid: str | None = None,
    limit: str | None = None,
) -> GetNotificationsResponse:
    """Get priority notifications for a user."""
    return await get_notifications_use_case.execute(
        GetNotificationsRequest(fid=fid, limit=limit)
    )


@router.get("/search-users", response_model=SearchUsersResponse)
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    q: str | None = None,
) -> SearchUsersResponse:
    """Search users, surfacing featured accounts first."""
    return await search_users_use_case.execute(SearchUsersRequest(q=q))
