"""Trending feed use case."""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import GatewayService


class GetTrendingRequest(BaseModel):
    """Trending feed request."""

    limit: Any = None
    time_window: str | None = None
    channel_id: str | None = None
    viewer_fid: Any = None


class GetTrendingResponse(BaseModel):
    """Trending feed response."""

    ok: bool = True
    data: list[dict[str, Any]]
    next: Any = None


class GetTrendingUseCase:
    """Use case for reading trending casts."""

    def __init__(self, gateway_service: GatewayService) -> None:
        self.gateway_service = gateway_service

    async def execute(self, request: GetTrendingRequest) -> GetTrendingResponse:
        result = await self.gateway_service.trending(
            limit=request.limit,
            time_window=request.time_window,
            channel_id=request.channel_id,
            viewer_fid=request.viewer_fid,
        )
        return GetTrendingResponse(
            data=result.get("casts") or [], next=result.get("next")
        )
