"""Resolve session use case."""

from pydantic import BaseModel

from homie.domain.service import AuthService
from homie.domain.service.auth_service import extract_bearer_token


class ResolveSessionRequest(BaseModel):
    """Resolve session request.

    The token may come from the Authorization header or the request body.
    """

    authorization: str | None = None
    token: str | None = None


class ResolveSessionResponse(BaseModel):
    """Resolve session response."""

    fid: int


class ResolveSessionUseCase:
    """Use case for exchanging a session token for the caller's FID."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize resolve session use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: ResolveSessionRequest) -> ResolveSessionResponse:
        """Verify the session token.

        Raises:
            AuthError: If the token is missing, malformed or invalid
        """
        token = extract_bearer_token(request.authorization, request.token)
        fid = await self.auth_service.resolve_fid(token)
        return ResolveSessionResponse(fid=fid)
