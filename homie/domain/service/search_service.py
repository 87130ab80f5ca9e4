"""User search domain service."""

from typing import Any

import logfire

from homie.domain.service.farcaster_api import FarcasterApi

from .base import Service

MIN_QUERY_LENGTH = 2


class FeaturedAccountPolicy:
    """Surfaces a fixed set of accounts first when a query targets them.

    This is an application rule layered on top of generic search: a query
    that plausibly names a featured account gets that account prepended
    even when upstream search ranks it low or misses it.
    """

    def __init__(self, usernames: list[str]) -> None:
        self.usernames = [u.lower().removeprefix("@") for u in usernames]

    def matching(self, query: str) -> list[str]:
        """Return featured usernames the query plausibly refers to.

        A match is a case-insensitive prefix or substring of the username.
        """
        needle = query.strip().lower().removeprefix("@")
        if len(needle) < MIN_QUERY_LENGTH:
            return []
        return [name for name in self.usernames if needle in name]

    @staticmethod
    def merge(
        featured: list[dict[str, Any]], results: list[dict[str, Any]], cap: int
    ) -> list[dict[str, Any]]:
        """Prepend featured users, drop duplicates by FID, truncate to cap."""
        merged: list[dict[str, Any]] = []
        seen: set[Any] = set()
        for user in [*featured, *results]:
            key = user.get("fid")
            if key in seen:
                continue
            seen.add(key)
            merged.append(user)
        return merged[:cap]


class UserSearchService(Service):
    """Domain service for searching Farcaster users."""

    def __init__(
        self,
        farcaster_api: FarcasterApi,
        policy: FeaturedAccountPolicy,
        result_cap: int = 5,
    ) -> None:
        """Initialize user search service.

        Args:
            farcaster_api: Hosted API used for search and lookups
            policy: Featured account policy applied to every query
            result_cap: Maximum number of users returned
        """
        self.farcaster_api = farcaster_api
        self.policy = policy
        self.result_cap = result_cap

    async def search(self, query: str | None) -> list[dict[str, Any]]:
        """Search users by name.

        Queries shorter than two characters return nothing without calling
        upstream.
        """
        if not query or len(query.strip()) < MIN_QUERY_LENGTH:
            return []

        q = query.strip()
        with logfire.span("user_search.search", query=q):
            featured = []
            for username in self.policy.matching(q):
                user = await self.farcaster_api.fetch_user_by_username(username)
                if user:
                    featured.append(user)

            results = await self.farcaster_api.search_users(q, self.result_cap)
            users = self.policy.merge(featured, results, self.result_cap)

            logfire.info(
                "Users searched",
                query=q,
                featured=len(featured),
                count=len(users),
            )
            return users
