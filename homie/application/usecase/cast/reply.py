"""Reply use case."""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import CastService


class ReplyRequest(BaseModel):
    """Reply request."""

    text: Any = None
    signer_uuid: str | None = None
    parent_hash: Any = None


class ReplyResponse(BaseModel):
    """Reply response."""

    ok: bool = True
    cast: dict[str, Any]


class ReplyUseCase:
    """Use case for replying to a cast."""

    def __init__(self, cast_service: CastService) -> None:
        self.cast_service = cast_service

    async def execute(self, request: ReplyRequest) -> ReplyResponse:
        cast = await self.cast_service.reply(
            request.text, request.signer_uuid, request.parent_hash
        )
        return ReplyResponse(cast=cast)
