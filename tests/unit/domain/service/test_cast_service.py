"""Unit tests for CastService."""

import pytest

from homie.adapter.farcaster import MockHubClient
from homie.adapter.neynar import MockNeynarClient
from homie.domain.error import AuthError, ValidationError
from homie.domain.service import CastService, FarcasterApi, HubSubmitter
from homie.domain.value import ReactionType
from tests.conftest import BOT_SIGNER_UUID, CAST_HASH
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _approved_signer(neynar: MockNeynarClient, fid: int = 123) -> str:
    signer = await neynar.create_signer()
    neynar.approve(signer.signer_uuid, fid)
    return signer.signer_uuid


class TestBuildDraft:
    """Tests for build_draft."""

    @pytest.mark.asyncio
    async def test_hash_parent_is_a_reply(self, unit_env):
        cast_service = await unit_env.get(CastService)

        draft = cast_service.build_draft("gm", parent=CAST_HASH)

        assert draft.parent == CAST_HASH

    @pytest.mark.asyncio
    async def test_url_parent_and_channel(self, unit_env):
        cast_service = await unit_env.get(CastService)

        draft = cast_service.build_draft(
            "gm",
            embeds=[{"url": "https://example.com/x.png"}],
            parent="https://warpcast.com/~/channel/homiehouse",
            channel_key="homiehouse",
        )

        assert draft.parent == "https://warpcast.com/~/channel/homiehouse"
        assert draft.channel_key == "homiehouse"
        assert len(draft.embeds) == 1

    @pytest.mark.asyncio
    async def test_malformed_hash_parent_is_rejected(self, unit_env):
        cast_service = await unit_env.get(CastService)

        with pytest.raises(ValidationError, match="Invalid parent format"):
            cast_service.build_draft("gm", parent="0x123")


class TestPublishDirect:
    """Tests for publish_direct."""

    @pytest.mark.asyncio
    async def test_submits_to_hub(self, unit_env):
        cast_service = await unit_env.get(CastService)
        hub = await unit_env.get(HubSubmitter)

        published = await cast_service.publish_direct("hi", "123", "ab" * 32)

        assert published.hash.startswith("0x")
        assert published.author_fid == 123
        assert isinstance(hub, MockHubClient)
        assert hub.submitted[0][0] == 123

    @pytest.mark.asyncio
    async def test_missing_fid_is_no_user(self, unit_env):
        cast_service = await unit_env.get(CastService)

        with pytest.raises(AuthError) as exc_info:
            await cast_service.publish_direct("hi", None, "ab" * 32)

        assert exc_info.value.code == "no_user"
        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_missing_key_is_no_signer(self, unit_env):
        cast_service = await unit_env.get(CastService)

        with pytest.raises(AuthError) as exc_info:
            await cast_service.publish_direct("hi", 123, "  ")

        assert exc_info.value.code == "no_signer"

    @pytest.mark.asyncio
    async def test_text_is_validated_before_submission(self, unit_env):
        cast_service = await unit_env.get(CastService)
        hub = await unit_env.get(HubSubmitter)

        with pytest.raises(ValidationError):
            await cast_service.publish_direct("a" * 321, 123, "ab" * 32)

        assert hub.submitted == []


class TestPublishHosted:
    """Tests for hosted publishing and bot signer fallback."""

    @pytest.mark.asyncio
    async def test_publishes_with_approved_signer(self, unit_env):
        cast_service = await unit_env.get(CastService)
        neynar = await unit_env.get(FarcasterApi)
        signer_uuid = await _approved_signer(neynar)

        cast = await cast_service.publish_hosted(
            cast_service.build_draft("gm", channel_key="homiehouse"), signer_uuid
        )

        assert cast["author"]["fid"] == 123
        assert neynar.payloads[-1] == {
            "signer_uuid": signer_uuid,
            "text": "gm",
            "channel_key": "homiehouse",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("state", ["generated", "pending_approval", "revoked"])
    async def test_non_approved_signer_is_rejected(self, unit_env, state):
        cast_service = await unit_env.get(CastService)
        neynar = await unit_env.get(FarcasterApi)
        signer = await neynar.create_signer()
        if state == "pending_approval":
            await neynar.register_signed_key(signer.signer_uuid, 99, 0, "0x")
        elif state == "revoked":
            neynar.approve(signer.signer_uuid, 123)
            neynar.revoke(signer.signer_uuid)

        with pytest.raises(AuthError) as exc_info:
            await cast_service.publish_hosted(
                cast_service.build_draft("gm"), signer.signer_uuid
            )

        assert exc_info.value.code == "signer_not_approved"
        assert exc_info.value.status_code == 403
        assert neynar.casts == []

    @pytest.mark.asyncio
    async def test_fallback_uses_bot_signer(self, unit_env):
        cast_service = await unit_env.get(CastService)
        neynar = await unit_env.get(FarcasterApi)

        await cast_service.publish_with_fallback(cast_service.build_draft("hello"))

        assert neynar.payloads[-1]["signer_uuid"] == BOT_SIGNER_UUID

    @pytest.mark.asyncio
    async def test_fallback_without_any_signer_is_no_signer(self, unit_env):
        cast_service = await unit_env.get(CastService)
        cast_service.bot_signer_uuid = None

        with pytest.raises(AuthError) as exc_info:
            await cast_service.publish_with_fallback(cast_service.build_draft("hello"))

        assert exc_info.value.code == "no_signer"


class TestReactions:
    """Tests for replies, likes and recasts."""

    @pytest.mark.asyncio
    async def test_reply_sets_parent(self, unit_env):
        cast_service = await unit_env.get(CastService)
        neynar = await unit_env.get(FarcasterApi)
        signer_uuid = await _approved_signer(neynar)

        await cast_service.reply("agreed", signer_uuid, CAST_HASH)

        assert neynar.payloads[-1]["parent"] == CAST_HASH

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        cast_service = await unit_env.get(CastService)
        neynar = await unit_env.get(FarcasterApi)
        signer_uuid = await _approved_signer(neynar)

        await cast_service.react(ReactionType.LIKE, CAST_HASH, signer_uuid)
        await cast_service.react(ReactionType.LIKE, CAST_HASH, signer_uuid)
        assert neynar.reactions == {(signer_uuid, "like", CAST_HASH)}

        await cast_service.unreact(ReactionType.LIKE, CAST_HASH, signer_uuid)
        assert neynar.reactions == set()

    @pytest.mark.asyncio
    async def test_reaction_without_signer(self, unit_env):
        cast_service = await unit_env.get(CastService)

        with pytest.raises(AuthError) as exc_info:
            await cast_service.react(ReactionType.RECAST, CAST_HASH, None)

        assert exc_info.value.code == "no_signer"

    @pytest.mark.asyncio
    async def test_reaction_target_must_be_a_hash(self, unit_env):
        cast_service = await unit_env.get(CastService)

        with pytest.raises(ValidationError, match="castHash"):
            await cast_service.react(ReactionType.LIKE, "nope", "x")
