"""Unit tests for AuthService."""

import pytest

from homie.domain.error import AuthError
from homie.domain.service import AuthService
from homie.domain.service.auth_service import (
    DEV_PROFILE,
    extract_bearer_token,
    normalize_domain,
)
from tests.conftest import make_siwf_message
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTokenExtraction:
    """Tests for extract_bearer_token and normalize_domain."""

    def test_bearer_header(self):
        assert extract_bearer_token("Bearer abc") == "abc"
        assert extract_bearer_token("bearer  abc ") == "abc"

    def test_body_token_is_fallback(self):
        assert extract_bearer_token(None, "xyz") == "xyz"
        assert extract_bearer_token(None, None) is None

    @pytest.mark.parametrize("header", ["Basic abc", "Bearer", "Bearer   "])
    def test_malformed_header(self, header):
        with pytest.raises(AuthError) as exc_info:
            extract_bearer_token(header)
        assert exc_info.value.code == "invalid_auth_format"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("localhost:3000", "localhost"),
            ("HomieHouse.xyz", "homiehouse.xyz"),
            (None, ""),
        ],
    )
    def test_normalize_domain(self, raw, expected):
        assert normalize_domain(raw) == expected


class TestResolveFid:
    """Tests for session token resolution."""

    @pytest.mark.asyncio
    async def test_valid_token(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        assert await auth_service.resolve_fid("fid:42") == 42

    @pytest.mark.asyncio
    async def test_missing_token(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(AuthError) as exc_info:
            await auth_service.resolve_fid(None)

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(AuthError, match="Invalid or expired token"):
            await auth_service.resolve_fid("garbage")

    @pytest.mark.asyncio
    async def test_optional_resolution(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        assert await auth_service.resolve_optional_fid(None) is None
        with pytest.raises(AuthError):
            await auth_service.resolve_optional_fid("garbage")


class TestSignIn:
    """Tests for SIWF sign-in."""

    @pytest.mark.asyncio
    async def test_profile_is_enriched_from_hosted_api(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        profile = await auth_service.sign_in(
            message=make_siwf_message(fid=123),
            signature="0x" + "00" * 65,
            nonce="abcd1234",
            domain="homiehouse.xyz",
        )

        assert profile.fid == 123
        assert profile.username == "alice"
        assert profile.display_name == "Alice"
        assert profile.avatar == "https://i.imgur.com/alice.png"

    @pytest.mark.asyncio
    async def test_host_header_with_port_is_used_without_domain(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        profile = await auth_service.sign_in(
            message=make_siwf_message(domain="localhost", fid=7),
            signature="0x00",
            host="localhost:3000",
        )

        assert profile.fid == 7
        assert profile.username is None

    @pytest.mark.asyncio
    async def test_domain_mismatch_is_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(AuthError, match="domain mismatch"):
            await auth_service.sign_in(
                message=make_siwf_message(domain="evil.example"),
                signature="0x00",
                domain="homiehouse.xyz",
            )

    @pytest.mark.asyncio
    async def test_missing_signature_is_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(AuthError, match="missing message or signature"):
            await auth_service.sign_in(
                message=make_siwf_message(), signature=None, domain="homiehouse.xyz"
            )

    @pytest.mark.asyncio
    async def test_mock_token_rejected_outside_development(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(AuthError):
            await auth_service.sign_in(message=None, signature=None, token="mock-token")

    @pytest.mark.asyncio
    async def test_mock_token_accepted_in_development(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        auth_service.allow_dev_bypass = True

        profile = await auth_service.sign_in(
            message=None, signature=None, token="mock-token"
        )

        assert profile == DEV_PROFILE
        assert profile.username == "dev_user"
