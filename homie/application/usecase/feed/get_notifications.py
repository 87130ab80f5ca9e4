"""Notifications use case."""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import GatewayService


class GetNotificationsRequest(BaseModel):
    """Notifications request."""

    fid: Any = None
    limit: Any = None


class GetNotificationsResponse(BaseModel):
    """Notifications response."""

    ok: bool = True
    data: list[dict[str, Any]]
    next: Any = None


class GetNotificationsUseCase:
    """Use case for reading a user's notifications."""

    def __init__(self, gateway_service: GatewayService) -> None:
        self.gateway_service = gateway_service

    async def execute(
        self, request: GetNotificationsRequest
    ) -> GetNotificationsResponse:
        result = await self.gateway_service.notifications(
            fid=request.fid, limit=request.limit
        )
        return GetNotificationsResponse(
            data=result.get("notifications") or [], next=result.get("next")
        )
