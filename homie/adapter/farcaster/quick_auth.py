"""Farcaster Quick Auth session token verification."""

from typing import Any

import httpx
import logfire

from homie.adapter.error import UpstreamError
from homie.domain.error import AuthError
from homie.domain.service.auth_service import TokenVerifier
from homie.util.jwt import JWTError, verify_session_token


class QuickAuthVerifier(TokenVerifier):
    """Base class for session token verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealQuickAuthVerifier(QuickAuthVerifier):
    """Verifies Quick Auth JWTs against the issuer's published keys."""

    def __init__(self, issuer: str, domain: str, timeout: float = 10.0) -> None:
        """Initialize Quick Auth verifier.

        Args:
            issuer: Token issuer, e.g. ``https://auth.farcaster.xyz``
            domain: Audience tokens must have been issued for
            timeout: JWKS request timeout in seconds
        """
        self.issuer = issuer.rstrip("/")
        self.domain = domain
        self.timeout = timeout
        self._jwks: dict[str, Any] | None = None

    async def _get_jwks(self) -> dict[str, Any]:
        if self._jwks is not None:
            return self._jwks

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.issuer}/.well-known/jwks.json", timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("JWKS HTTP error", issuer=self.issuer, error=str(e))
            raise UpstreamError("quick_auth", 502, str(e))

        if response.status_code != 200:
            logfire.error(
                "JWKS request failed",
                issuer=self.issuer,
                status_code=response.status_code,
            )
            raise UpstreamError("quick_auth", response.status_code, response.text)

        self._jwks = response.json()
        return self._jwks

    async def verify(self, token: str) -> int:
        jwks = await self._get_jwks()
        try:
            payload = verify_session_token(
                token, jwks, audience=self.domain, issuer=self.issuer
            )
        except JWTError as e:
            logfire.warn("Session token rejected", error=str(e))
            raise AuthError("Invalid or expired token", code="invalid_token")
        return payload.fid


class MockQuickAuthVerifier(QuickAuthVerifier):
    """Mock verifier for testing.

    Accepts tokens of the form ``fid:<n>`` and rejects everything else.
    """

    async def verify(self, token: str) -> int:
        prefix, _, fid = token.partition(":")
        if prefix != "fid" or not fid.isdigit() or int(fid) <= 0:
            raise AuthError("Invalid or expired token", code="invalid_token")
        return int(fid)
