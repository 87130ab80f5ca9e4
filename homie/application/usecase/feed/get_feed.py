"""Feed use case."""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import GatewayService


class GetFeedRequest(BaseModel):
    """Feed request."""

    feed_type: str | None = None
    fid: Any = None
    channel: str | None = None
    limit: Any = None
    viewer_fid: int | None = None  # From an optional bearer token


class GetFeedResponse(BaseModel):
    """Feed response."""

    ok: bool = True
    data: list[dict[str, Any]]
    next: Any = None


class GetFeedUseCase:
    """Use case for reading a home or channel feed."""

    def __init__(self, gateway_service: GatewayService) -> None:
        self.gateway_service = gateway_service

    async def execute(self, request: GetFeedRequest) -> GetFeedResponse:
        """Fetch the feed.

        Raises:
            ValidationError: If the feed type or FID is invalid
            UpstreamError: If the hosted API fails
        """
        result = await self.gateway_service.feed(
            feed_type=request.feed_type,
            fid=request.fid,
            channel_id=request.channel,
            limit=request.limit,
            viewer_fid=request.viewer_fid,
        )
        return GetFeedResponse(
            data=result.get("casts") or [], next=result.get("next")
        )
