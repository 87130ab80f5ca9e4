"""Unit tests for Sign-In-With-Farcaster verification."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest
from eth_account import Account
from eth_account.messages import encode_defunct

from homie.adapter.error import UpstreamError
from homie.adapter.farcaster import MockSiwfVerifier, RealSiwfVerifier
from homie.adapter.farcaster.siwf import (
    check_message,
    parse_siwf_message,
    recover_address,
)
from homie.domain.error import AuthError
from tests.conftest import make_siwf_message

NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


def _sign(account, message: str) -> str:
    signed = account.sign_message(encode_defunct(text=message))
    return f"0x{bytes(signed.signature).hex()}"


class TestParse:
    """Tests for parse_siwf_message."""

    def test_parses_fields(self):
        parsed = parse_siwf_message(make_siwf_message(fid=42, nonce="n0nce"))

        assert parsed.domain == "homiehouse.xyz"
        assert parsed.address == "0x" + "11" * 20
        assert parsed.statement == "Farcaster Auth"
        assert parsed.nonce == "n0nce"
        assert parsed.chain_id == 10
        assert parsed.fid == 42

    def test_keeps_port_in_domain(self):
        parsed = parse_siwf_message(make_siwf_message(domain="localhost:3000"))
        assert parsed.domain == "localhost:3000"

    @pytest.mark.parametrize(
        "message",
        [
            "",
            "hello",
            "homiehouse.xyz wants you to sign in with your Ethereum account:\nnot-an-address",
        ],
    )
    def test_rejects_malformed(self, message):
        with pytest.raises(AuthError):
            parse_siwf_message(message)


class TestCheckMessage:
    """Tests for check_message."""

    def test_returns_fid(self):
        parsed = parse_siwf_message(make_siwf_message(fid=7))
        assert check_message(parsed, "homiehouse.xyz", "abcd1234", NOW) == 7

    def test_message_port_is_ignored(self):
        parsed = parse_siwf_message(make_siwf_message(domain="LocalHost:3000"))
        assert check_message(parsed, "localhost", None, NOW) == 123

    def test_domain_mismatch(self):
        parsed = parse_siwf_message(make_siwf_message(domain="evil.example"))
        with pytest.raises(AuthError, match="domain mismatch"):
            check_message(parsed, "homiehouse.xyz", None, NOW)

    def test_nonce_mismatch(self):
        parsed = parse_siwf_message(make_siwf_message(nonce="other"))
        with pytest.raises(AuthError, match="nonce mismatch"):
            check_message(parsed, "homiehouse.xyz", "abcd1234", NOW)

    def test_nonce_skipped_when_not_supplied(self):
        parsed = parse_siwf_message(make_siwf_message(nonce="other"))
        assert check_message(parsed, "homiehouse.xyz", None, NOW) == 123

    def test_expired(self):
        parsed = parse_siwf_message(
            make_siwf_message(expiration_time="2025-01-02T00:00:00.000Z")
        )
        with pytest.raises(AuthError, match="expired"):
            check_message(parsed, "homiehouse.xyz", None, NOW)

    def test_not_yet_expired(self):
        parsed = parse_siwf_message(
            make_siwf_message(expiration_time="2030-01-01T00:00:00.000Z")
        )
        assert check_message(parsed, "homiehouse.xyz", None, NOW) == 123

    def test_expiry_without_offset_is_utc(self):
        future = parse_siwf_message(
            make_siwf_message(expiration_time="2099-01-01T00:00:00")
        )
        past = parse_siwf_message(
            make_siwf_message(expiration_time="2025-01-01T00:00:00")
        )

        assert check_message(future, "homiehouse.xyz", None) == 123
        with pytest.raises(AuthError, match="expired"):
            check_message(past, "homiehouse.xyz", None, NOW)

    def test_unparseable_expiry(self):
        parsed = parse_siwf_message(make_siwf_message(expiration_time="next week"))
        with pytest.raises(AuthError, match="invalid SIWF message"):
            check_message(parsed, "homiehouse.xyz", None, NOW)

    def test_missing_fid_resource(self):
        message = make_siwf_message().replace("farcaster://fid/123", "https://x.y")
        parsed = parse_siwf_message(message)
        with pytest.raises(AuthError, match="fid"):
            check_message(parsed, "homiehouse.xyz", None, NOW)


class TestRecoverAddress:
    """Tests for recover_address."""

    def test_recovers_signer(self):
        account = Account.create()
        message = make_siwf_message(address=account.address)

        assert recover_address(message, _sign(account, message)) == account.address

    def test_garbage_signature(self):
        with pytest.raises(AuthError, match="signature"):
            recover_address(make_siwf_message(), "0x1234")


class TestRealSiwfVerifier:
    """Tests for RealSiwfVerifier with the custody lookup stubbed."""

    @pytest.fixture
    def verifier(self):
        return RealSiwfVerifier(rpc_url="http://localhost:8545")

    @pytest.mark.asyncio
    async def test_valid_sign_in(self, verifier):
        account = Account.create()
        message = make_siwf_message(address=account.address, fid=321)

        with patch.object(
            verifier, "custody_fid", AsyncMock(return_value=321)
        ) as custody:
            fid = await verifier.verify(
                message, _sign(account, message), "homiehouse.xyz", "abcd1234"
            )

        assert fid == 321
        custody.assert_awaited_once_with(account.address)

    @pytest.mark.asyncio
    async def test_signed_by_other_account(self, verifier):
        account = Account.create()
        message = make_siwf_message(address=account.address)
        signature = _sign(Account.create(), message)

        with patch.object(verifier, "custody_fid", AsyncMock(return_value=123)):
            with pytest.raises(AuthError, match="signature verification failed"):
                await verifier.verify(message, signature, "homiehouse.xyz")

    @pytest.mark.asyncio
    async def test_address_not_custody_of_fid(self, verifier):
        account = Account.create()
        message = make_siwf_message(address=account.address, fid=123)

        with patch.object(verifier, "custody_fid", AsyncMock(return_value=999)):
            with pytest.raises(AuthError, match="signature verification failed"):
                await verifier.verify(
                    message, _sign(account, message), "homiehouse.xyz"
                )

    @pytest.mark.asyncio
    async def test_rpc_failure_propagates(self, verifier):
        account = Account.create()
        message = make_siwf_message(address=account.address)
        failure = AsyncMock(side_effect=UpstreamError("optimism", 502, "down"))

        with patch.object(verifier, "custody_fid", failure):
            with pytest.raises(UpstreamError):
                await verifier.verify(
                    message, _sign(account, message), "homiehouse.xyz"
                )

    @pytest.mark.asyncio
    async def test_domain_checked_before_signature(self, verifier):
        custody = AsyncMock()
        with patch.object(verifier, "custody_fid", custody):
            with pytest.raises(AuthError, match="domain mismatch"):
                await verifier.verify(
                    make_siwf_message(domain="evil.example"), "0x00", "homiehouse.xyz"
                )
        custody.assert_not_awaited()


class TestMockSiwfVerifier:
    """The mock still enforces message claims."""

    @pytest.mark.asyncio
    async def test_accepts_any_signature(self):
        fid = await MockSiwfVerifier().verify(
            make_siwf_message(fid=5), "0x00", "homiehouse.xyz"
        )
        assert fid == 5

    @pytest.mark.asyncio
    async def test_rejects_wrong_domain(self):
        with pytest.raises(AuthError):
            await MockSiwfVerifier().verify(
                make_siwf_message(domain="evil.example"), "0x00", "homiehouse.xyz"
            )
