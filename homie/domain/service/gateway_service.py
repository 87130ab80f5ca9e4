"""Read-side proxy domain service.

Every call is a live round-trip to the hosted API. Responses are relayed
with minimal reshaping: envelopes are unwrapped and upstream errors pass
through untouched.
"""

from typing import Any

import logfire

from homie.domain.error import NotFoundError, ValidationError
from homie.domain.service.farcaster_api import FarcasterApi
from homie.domain.validation import (
    validate_channel_key,
    validate_fid,
    validate_limit,
    validate_optional_fid,
    validate_username,
)
from homie.domain.value import FeedType

from .base import Service

TRENDING_TIME_WINDOWS = ("1h", "6h", "12h", "24h", "7d")

# Following lists are fetched in one page and trimmed locally
FOLLOWING_PAGE_SIZE = 150
MAX_FRIENDS = 50


def _friend_from_user(user: dict[str, Any]) -> dict[str, Any]:
    return {
        "fid": user.get("fid"),
        "username": user.get("username"),
        "displayName": user.get("display_name"),
        "pfpUrl": user.get("pfp_url"),
        "ethAddresses": user["verified_addresses"]["eth_addresses"],
    }


def _has_eth_address(user: dict[str, Any]) -> bool:
    addresses = (user.get("verified_addresses") or {}).get("eth_addresses") or []
    return len(addresses) > 0


class GatewayService(Service):
    """Domain service for feeds, channels, friends, profiles and trending."""

    def __init__(self, farcaster_api: FarcasterApi) -> None:
        """Initialize gateway service.

        Args:
            farcaster_api: Hosted API serving every read
        """
        self.farcaster_api = farcaster_api

    async def feed(
        self,
        feed_type: str | None,
        fid: Any,
        channel_id: str | None,
        limit: Any,
        viewer_fid: int | None = None,
    ) -> dict[str, Any]:
        """Fetch a home or channel feed.

        Without an explicit FID the authenticated viewer's feed is used.

        Returns:
            ``{casts, next}`` as returned upstream
        """
        channel = validate_channel_key(channel_id) if channel_id else None
        kind = FeedType(feed_type) if feed_type in {t.value for t in FeedType} else None
        if kind is None:
            if feed_type:
                raise ValidationError("Invalid feed_type", "feed_type")
            kind = FeedType.FILTER if channel else FeedType.FOLLOWING

        feed_fid = validate_optional_fid(fid) or viewer_fid
        if kind == FeedType.FOLLOWING and feed_fid is None:
            raise ValidationError("fid is required", "fid")

        params: dict[str, Any] = {
            "feed_type": kind.value,
            "limit": validate_limit(limit, default=25, maximum=100),
        }
        if feed_fid is not None:
            params["fid"] = feed_fid
        if channel:
            params["filter_type"] = "channel_id"
            params["channel_id"] = channel

        with logfire.span("gateway_service.feed", feed_type=kind.value, fid=feed_fid):
            data = await self.farcaster_api.fetch_feed(params)
            logfire.info("Feed fetched", count=len(data.get("casts") or []))
            return data

    async def channels(self, fid: Any, limit: Any) -> list[dict[str, Any]]:
        """List channels a user belongs to, or popular channels without an FID."""
        user_fid = validate_optional_fid(fid)
        page = validate_limit(limit, default=25, maximum=100)

        with logfire.span("gateway_service.channels", fid=user_fid, limit=page):
            if user_fid is not None:
                data = await self.farcaster_api.fetch_user_channels(user_fid, page)
            else:
                data = await self.farcaster_api.fetch_channel_list(page)
            return data.get("channels") or []

    async def friends(self, fid: Any) -> list[dict[str, Any]]:
        """List followed accounts that have a verified Ethereum address."""
        user_fid = validate_fid(fid)

        with logfire.span("gateway_service.friends", fid=user_fid):
            data = await self.farcaster_api.fetch_following(
                user_fid, FOLLOWING_PAGE_SIZE
            )
            # Following entries wrap the user object
            users = [entry.get("user", entry) for entry in data.get("users") or []]
            friends = [_friend_from_user(u) for u in users if _has_eth_address(u)]
            logfire.info("Friends resolved", fid=user_fid, count=len(friends))
            return friends[:MAX_FRIENDS]

    async def profile(
        self,
        fid: Any = None,
        username: str | None = None,
        include_casts: bool = False,
        casts_limit: Any = None,
    ) -> tuple[dict[str, Any], list[dict[str, Any]] | None]:
        """Look up a profile by username or FID.

        Returns:
            Tuple of (user, casts); casts is None unless requested

        Raises:
            ValidationError: If neither username nor FID is supplied
            NotFoundError: If no such user exists
        """
        with logfire.span("gateway_service.profile", username=username, fid=fid):
            if username:
                name = validate_username(username)
                user = await self.farcaster_api.fetch_user_by_username(name)
                identifier = name
            elif fid is not None and fid != "":
                user_fid = validate_fid(fid)
                users = await self.farcaster_api.fetch_users_bulk([user_fid])
                user = users[0] if users else None
                identifier = str(user_fid)
            else:
                raise ValidationError("Either fid or username is required", "fid")

            if not user:
                raise NotFoundError("User", identifier)

            casts = None
            if include_casts:
                data = await self.farcaster_api.fetch_user_casts(
                    user["fid"], validate_limit(casts_limit, default=25, maximum=50)
                )
                casts = data.get("casts") or []

            return user, casts

    async def trending(
        self,
        limit: Any,
        time_window: str | None = None,
        channel_id: str | None = None,
        viewer_fid: Any = None,
    ) -> dict[str, Any]:
        """Fetch the trending feed.

        Returns:
            ``{casts, next}`` as returned upstream
        """
        window = time_window or "24h"
        if window not in TRENDING_TIME_WINDOWS:
            raise ValidationError(
                f"time_window must be one of {', '.join(TRENDING_TIME_WINDOWS)}",
                "time_window",
            )

        params: dict[str, Any] = {
            "limit": validate_limit(limit, default=10, maximum=10),
            "time_window": window,
            "provider": "neynar",
        }
        if channel_id:
            params["channel_id"] = validate_channel_key(channel_id)
        viewer = validate_optional_fid(viewer_fid, "viewer_fid")
        if viewer is not None:
            params["viewer_fid"] = viewer

        with logfire.span("gateway_service.trending", time_window=window):
            data = await self.farcaster_api.fetch_trending(params)
            logfire.info("Trending fetched", count=len(data.get("casts") or []))
            return data

    async def notifications(self, fid: Any, limit: Any = None) -> dict[str, Any]:
        """Fetch priority notifications for a user.

        Returns:
            ``{notifications, next}`` as returned upstream
        """
        user_fid = validate_fid(fid)

        with logfire.span("gateway_service.notifications", fid=user_fid):
            data = await self.farcaster_api.fetch_notifications(
                user_fid, validate_limit(limit, default=25, maximum=25)
            )
            logfire.info(
                "Notifications fetched",
                fid=user_fid,
                count=len(data.get("notifications") or []),
            )
            return data
