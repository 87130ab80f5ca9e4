"""Hosted compose use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from homie.domain.service import CastService
from homie.domain.validation import validate_optional_fid


class HostedComposeRequest(BaseModel):
    """Compose request published through a managed signer."""

    text: Any = None
    embeds: Any = None
    channel_key: str | None = None
    parent_url: str | None = None
    signer_uuid: str | None = None
    fid: Any = None


class HostedComposeResponse(BaseModel):
    """Hosted compose response."""

    ok: bool = True
    success: bool = True
    cast: dict[str, Any]


class HostedComposeUseCase:
    """Use case for publishing a cast through the hosted API.

    Casts go out under the caller's signer when one is supplied and under
    the application's bot signer otherwise.
    """

    def __init__(self, cast_service: CastService) -> None:
        """Initialize hosted compose use case.

        Args:
            cast_service: Cast publishing domain service
        """
        self.cast_service = cast_service

    async def execute(self, request: HostedComposeRequest) -> HostedComposeResponse:
        """Validate the draft and publish it.

        Raises:
            ValidationError: If any part of the cast is malformed
            AuthError: If no signer is available or it is not approved
            UpstreamError: If the hosted API rejects the cast
        """
        author_fid = validate_optional_fid(request.fid)
        draft = self.cast_service.build_draft(
            request.text,
            embeds=request.embeds,
            parent=request.parent_url,
            channel_key=request.channel_key,
        )

        with logfire.span("hosted_compose", fid=author_fid):
            cast = await self.cast_service.publish_with_fallback(
                draft, request.signer_uuid
            )
            return HostedComposeResponse(cast=cast)
