"""Session token utilities.

Farcaster Quick Auth issues JWTs whose subject is the user's FID. Keys
are published as a JWKS by the issuer.
"""

from typing import Any

import jwt
from jwt.exceptions import PyJWKError, PyJWKSetError
from pydantic import BaseModel

SESSION_TOKEN_ALGORITHMS = ["EdDSA", "ES256", "RS256"]


class SessionTokenPayload(BaseModel):
    """Verified session token payload."""

    fid: int
    issuer: str
    audience: str
    expires_at: int


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_session_token(
    token: str, jwks: dict[str, Any], audience: str, issuer: str
) -> SessionTokenPayload:
    """Verify a session token against a JWKS.

    Args:
        token: Encoded JWT
        jwks: JSON Web Key Set published by the issuer
        audience: Domain the token must have been issued for
        issuer: Expected ``iss`` claim

    Returns:
        Verified payload

    Raises:
        JWTError: If the token is malformed, expired, or signed by an unknown key
    """
    try:
        header = jwt.get_unverified_header(token)
        key_set = jwt.PyJWKSet.from_dict(jwks)
    except (jwt.InvalidTokenError, PyJWKError, PyJWKSetError) as e:
        raise JWTError(f"Invalid token: {e}")

    kid = header.get("kid")
    signing_key = next(
        (k for k in key_set.keys if kid is None or k.key_id == kid), None
    )
    if signing_key is None:
        raise JWTError("Token signed by unknown key")

    try:
        payload = jwt.decode(
            token,
            signing_key.key,
            algorithms=SESSION_TOKEN_ALGORITHMS,
            audience=audience,
            issuer=issuer,
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}")

    try:
        fid = int(payload["sub"])
    except (TypeError, ValueError):
        raise JWTError("Token subject is not an FID")

    return SessionTokenPayload(
        fid=fid,
        issuer=payload["iss"],
        audience=audience,
        expires_at=payload["exp"],
    )
