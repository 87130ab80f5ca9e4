"""List friends use case."""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import GatewayService


class ListFriendsRequest(BaseModel):
    """List friends request."""

    fid: Any = None


class ListFriendsResponse(BaseModel):
    """Followed accounts with a verified Ethereum address."""

    ok: bool = True
    data: list[dict[str, Any]]


class ListFriendsUseCase:
    """Use case for listing friends that can receive onchain payments."""

    def __init__(self, gateway_service: GatewayService) -> None:
        self.gateway_service = gateway_service

    async def execute(self, request: ListFriendsRequest) -> ListFriendsResponse:
        friends = await self.gateway_service.friends(request.fid)
        return ListFriendsResponse(data=friends)
