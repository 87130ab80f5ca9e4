"""Unit tests for UserSearchService and FeaturedAccountPolicy."""

import pytest

from homie.domain.service import FarcasterApi, FeaturedAccountPolicy, UserSearchService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestFeaturedAccountPolicy:
    """Tests for the featured account rule."""

    def test_matches_substring_case_insensitively(self):
        policy = FeaturedAccountPolicy(["HomieHouse"])

        assert policy.matching("homie") == ["homiehouse"]
        assert policy.matching("@HOUSE") == ["homiehouse"]
        assert policy.matching("dwr") == []

    def test_short_queries_match_nothing(self):
        assert FeaturedAccountPolicy(["homiehouse"]).matching("h") == []

    def test_merge_dedupes_by_fid_and_caps(self):
        featured = [{"fid": 1, "username": "homiehouse"}]
        results = [{"fid": i} for i in range(1, 10)]

        merged = FeaturedAccountPolicy.merge(featured, results, cap=5)

        assert [u["fid"] for u in merged] == [1, 2, 3, 4, 5]
        assert merged[0]["username"] == "homiehouse"


class RecordingSearchApi:
    def __init__(self):
        self.calls = 0

    async def search_users(self, query, limit):
        self.calls += 1
        return []

    async def fetch_user_by_username(self, username):
        self.calls += 1
        return None


class TestSearch:
    """Tests for user search."""

    @pytest.mark.asyncio
    async def test_featured_account_is_prepended(self, unit_env):
        search_service = await unit_env.get(UserSearchService)

        users = await search_service.search("homie")

        assert users[0]["username"] == "homiehouse"
        assert len(users) == 1

    @pytest.mark.asyncio
    async def test_plain_search(self, unit_env):
        search_service = await unit_env.get(UserSearchService)
        neynar = await unit_env.get(FarcasterApi)

        users = await search_service.search("alice")

        assert [u["fid"] for u in users] == [123]
        assert len(neynar.users) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", [None, "", "a", " b "])
    async def test_short_query_skips_upstream(self, query):
        api = RecordingSearchApi()
        search_service = UserSearchService(api, FeaturedAccountPolicy(["homiehouse"]))

        assert await search_service.search(query) == []
        assert api.calls == 0
