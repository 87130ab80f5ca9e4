"""List channels use case."""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import GatewayService


class ListChannelsRequest(BaseModel):
    """List channels request."""

    fid: Any = None
    limit: Any = None


class ListChannelsResponse(BaseModel):
    """List channels response."""

    ok: bool = True
    channels: list[dict[str, Any]]


class ListChannelsUseCase:
    """Use case for listing a user's channels, or popular ones."""

    def __init__(self, gateway_service: GatewayService) -> None:
        self.gateway_service = gateway_service

    async def execute(self, request: ListChannelsRequest) -> ListChannelsResponse:
        channels = await self.gateway_service.channels(request.fid, request.limit)
        return ListChannelsResponse(channels=channels)
