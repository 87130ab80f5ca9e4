"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from homie.application.usecase.auth import (
    ResolveSessionRequest,
    ResolveSessionResponse,
    ResolveSessionUseCase,
    SignInRequest,
    SignInResponse,
    SignInUseCase,
)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class SessionAPIRequest(BaseModel):
    """API request for resolving a session token."""

    token: str | None = None


class SiwfAPIRequest(BaseModel):
    """API request for Sign-In-With-Farcaster."""

    message: str | None = None
    signature: str | None = None
    nonce: str | None = None
    domain: str | None = None
    token: str | None = None


@router.post("/session", response_model=ResolveSessionResponse)
async def resolve_session(
    resolve_session_use_case: FromDishka[ResolveSessionUseCase],
    request: SessionAPIRequest | None = None,
    authorization: str | None = Header(default=None),
) -> ResolveSessionResponse:
    """Exchange a bearer session token for the caller's FID.

    The token is read from ``Authorization: Bearer <token>`` or, failing
    that, from the body ``token`` field.
    """
    return await resolve_session_use_case.execute(
        ResolveSessionRequest(
            authorization=authorization,
            token=request.token if request else None,
        )
    )


@router.post("/siwf", response_model=SignInResponse)
async def sign_in_with_farcaster(
    request: SiwfAPIRequest,
    sign_in_use_case: FromDishka[SignInUseCase],
    host: str | None = Header(default=None),
) -> SignInResponse:
    """Verify a SIWF message and return the signer's profile.

    When the client does not claim a domain, the Host header is used.
    """
    return await sign_in_use_case.execute(
        SignInRequest(
            message=request.message,
            signature=request.signature,
            nonce=request.nonce,
            domain=request.domain,
            host=host,
            token=request.token,
        )
    )
