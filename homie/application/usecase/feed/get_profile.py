"""Get profile use case."""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import GatewayService


class GetProfileRequest(BaseModel):
    """Profile lookup by FID or username."""

    fid: Any = None
    username: str | None = None
    casts: bool = False
    casts_limit: Any = None


class GetProfileResponse(BaseModel):
    """Profile response."""

    user: dict[str, Any]
    casts: list[dict[str, Any]] | None = None


class GetProfileUseCase:
    """Use case for looking up a profile and, optionally, recent casts."""

    def __init__(self, gateway_service: GatewayService) -> None:
        self.gateway_service = gateway_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Look up the profile.

        Raises:
            ValidationError: If neither FID nor username is supplied
            NotFoundError: If the user does not exist
        """
        user, casts = await self.gateway_service.profile(
            fid=request.fid,
            username=request.username,
            include_casts=request.casts,
            casts_limit=request.casts_limit,
        )
        return GetProfileResponse(user=user, casts=casts)
