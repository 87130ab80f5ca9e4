"""Authentication domain service."""

import logfire

from homie.domain.error import AuthError
from homie.domain.service.farcaster_api import FarcasterApi
from homie.domain.value import FarcasterProfile

from .base import Service

DEV_TOKEN_MARKER = "mock"

DEV_PROFILE = FarcasterProfile(
    username="dev_user",
    display_name="Developer",
    avatar="https://www.gravatar.com/avatar/?d=mp&s=80",
)


class TokenVerifier:
    """Verifies bearer session tokens issued by an identity provider."""

    async def verify(self, token: str) -> int:
        """Verify a session token.

        Args:
            token: Raw bearer token

        Returns:
            FID the token was issued for

        Raises:
            AuthError: If the token is invalid, expired or for another audience
        """
        raise NotImplementedError


class SiwfVerifier:
    """Verifies Sign-In-With-Farcaster messages."""

    async def verify(
        self, message: str, signature: str, domain: str, nonce: str | None = None
    ) -> int:
        """Verify a signed SIWF message.

        Args:
            message: EIP-4361 formatted message
            signature: Hex signature from the custody wallet
            domain: Bare hostname the message must have been issued for
            nonce: Expected nonce (skipped when None)

        Returns:
            FID of the signer

        Raises:
            AuthError: If anything about the message or signature does not check out
        """
        raise NotImplementedError


def normalize_domain(raw: str | None) -> str:
    """Reduce a host or domain to its bare hostname.

    ``localhost:3000`` becomes ``localhost``.
    """
    if not raw:
        return ""
    return str(raw).strip().split(":")[0].lower()


def extract_bearer_token(
    authorization: str | None, body_token: str | None = None
) -> str | None:
    """Pull a session token out of an Authorization header or request body.

    Args:
        authorization: Value of the Authorization header
        body_token: ``token`` field of the request body

    Returns:
        Token if present, None otherwise

    Raises:
        AuthError: If an Authorization header is present but not a Bearer token
    """
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise AuthError(
                "Invalid authorization format. Expected: Bearer <token>",
                code="invalid_auth_format",
            )
        return token.strip()

    if body_token and body_token.strip():
        return body_token.strip()

    return None


class AuthService(Service):
    """Domain service resolving credentials to Farcaster identities.

    Two independent strategies:
    - bearer session tokens (Quick Auth), resolved to an FID
    - SIWF messages, resolved to a profile
    """

    def __init__(
        self,
        token_verifier: TokenVerifier,
        siwf_verifier: SiwfVerifier,
        farcaster_api: FarcasterApi,
        allow_dev_bypass: bool = False,
    ) -> None:
        """Initialize auth service.

        Args:
            token_verifier: Session token verifier
            siwf_verifier: SIWF message verifier
            farcaster_api: Hosted API used to enrich sign-in profiles
            allow_dev_bypass: Accept mock tokens (development only)
        """
        self.token_verifier = token_verifier
        self.siwf_verifier = siwf_verifier
        self.farcaster_api = farcaster_api
        self.allow_dev_bypass = allow_dev_bypass

    async def resolve_fid(self, token: str | None) -> int:
        """Resolve a session token to an FID.

        Raises:
            AuthError: If the token is missing or invalid
        """
        with logfire.span("auth_service.resolve_fid"):
            if not token:
                raise AuthError("Authorization token required", code="missing_token")

            fid = await self.token_verifier.verify(token)
            logfire.info("Session token verified", fid=fid)
            return fid

    async def resolve_optional_fid(self, token: str | None) -> int | None:
        """Resolve a session token if one was sent.

        Anonymous callers get None; a token that is present but invalid
        still fails.
        """
        if not token:
            return None
        return await self.resolve_fid(token)

    async def sign_in(
        self,
        message: str | None,
        signature: str | None,
        nonce: str | None = None,
        domain: str | None = None,
        host: str | None = None,
        token: str | None = None,
    ) -> FarcasterProfile:
        """Verify a SIWF payload and return the signer's profile.

        Args:
            message: SIWF message
            signature: Custody signature over the message
            nonce: Nonce the client was issued
            domain: Domain claimed by the client
            host: Request Host header (used when no domain is claimed)
            token: Development mock token

        Returns:
            Profile with fid, username, display name and avatar

        Raises:
            AuthError: If verification fails for any reason
        """
        with logfire.span("auth_service.sign_in"):
            if token and DEV_TOKEN_MARKER in token:
                if not self.allow_dev_bypass:
                    logfire.warn("Mock sign-in token rejected outside development")
                    raise AuthError("signature verification failed")
                logfire.info("Development sign-in bypass used")
                return DEV_PROFILE

            if not message or not signature:
                raise AuthError("missing message or signature")

            normalized = normalize_domain(domain or host)
            if not normalized:
                raise AuthError("missing domain")

            fid = await self.siwf_verifier.verify(
                message=message,
                signature=signature,
                domain=normalized,
                nonce=nonce,
            )
            logfire.info("SIWF message verified", fid=fid, domain=normalized)

            return await self._load_profile(fid)

    async def _load_profile(self, fid: int) -> FarcasterProfile:
        users = await self.farcaster_api.fetch_users_bulk([fid])
        if not users:
            logfire.warn("Signed-in FID has no hosted profile", fid=fid)
            return FarcasterProfile(fid=fid)

        user = users[0]
        return FarcasterProfile(
            fid=fid,
            username=user.get("username"),
            display_name=user.get("display_name"),
            avatar=user.get("pfp_url"),
        )
