"""Direct hub compose use case."""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import CastService


class ComposeRequest(BaseModel):
    """Compose request signed with a caller-held key."""

    text: Any = None
    fid: Any = None
    private_key: str | None = None
    embeds: Any = None


class ComposeResponse(BaseModel):
    """Compose response."""

    ok: bool = True
    hash: str


class ComposeUseCase:
    """Use case for publishing a cast straight to a hub."""

    def __init__(self, cast_service: CastService) -> None:
        self.cast_service = cast_service

    async def execute(self, request: ComposeRequest) -> ComposeResponse:
        """Build, sign and submit a cast.

        Raises:
            ValidationError: If the text or embeds are invalid
            AuthError: If the FID or private key is missing
            UpstreamError: If the hub rejects the message
        """
        published = await self.cast_service.publish_direct(
            text=request.text,
            fid=request.fid,
            private_key=request.private_key,
            embeds=request.embeds,
        )
        return ComposeResponse(hash=published.hash)
