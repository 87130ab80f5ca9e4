"""Cast publishing routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel, ConfigDict, Field

from homie.application.usecase.cast import (
    ComposeRequest,
    ComposeResponse,
    ComposeUseCase,
    HostedComposeRequest,
    HostedComposeResponse,
    HostedComposeUseCase,
    ReactRequest,
    ReactResponse,
    ReactUseCase,
    ReplyRequest,
    ReplyResponse,
    ReplyUseCase,
    UnreactResponse,
    UnreactUseCase,
)
from homie.domain.value import ReactionType

router = APIRouter(tags=["casts"], route_class=DishkaRoute)


class ComposeAPIRequest(BaseModel):
    """API request for publishing directly to a hub."""

    model_config = ConfigDict(populate_by_name=True)

    text: Any = None
    fid: Any = None
    private_key: str | None = Field(default=None, alias="privateKey")
    embeds: Any = None


class HostedComposeAPIRequest(BaseModel):
    """API request for publishing through a managed signer."""

    model_config = ConfigDict(populate_by_name=True)

    text: Any = None
    embeds: Any = None
    channel_key: str | None = Field(default=None, alias="channelKey")
    parent_url: str | None = Field(default=None, alias="parentUrl")
    signer_uuid: str | None = Field(default=None, alias="signerUuid")
    fid: Any = None


class ReplyAPIRequest(BaseModel):
    """API request for replying to a cast."""

    model_config = ConfigDict(populate_by_name=True)

    text: Any = None
    signer_uuid: str | None = Field(default=None, alias="signerUuid")
    parent_hash: Any = Field(default=None, alias="parentHash")


class ReactionAPIRequest(BaseModel):
    """API request for liking or recasting."""

    model_config = ConfigDict(populate_by_name=True)

    cast_hash: Any = Field(default=None, alias="castHash")
    signer_uuid: str | None = Field(default=None, alias="signerUuid")


@router.post("/compose", response_model=ComposeResponse)
async def compose(
    request: ComposeAPIRequest,
    compose_use_case: FromDishka[ComposeUseCase],
) -> ComposeResponse:
    """Publish a cast signed with the caller's own key.

    The key is used once to sign the message and is never stored or logged.
    """
    return await compose_use_case.execute(
        ComposeRequest(
            text=request.text,
            fid=request.fid,
            private_key=request.private_key,
            embeds=request.embeds,
        )
    )


@router.post("/privy-compose", response_model=HostedComposeResponse)
async def hosted_compose(
    request: HostedComposeAPIRequest,
    hosted_compose_use_case: FromDishka[HostedComposeUseCase],
) -> HostedComposeResponse:
    """Publish a cast through the hosted API, falling back to the bot signer."""
    return await hosted_compose_use_case.execute(
        HostedComposeRequest(
            text=request.text,
            embeds=request.embeds,
            channel_key=request.channel_key,
            parent_url=request.parent_url,
            signer_uuid=request.signer_uuid,
            fid=request.fid,
        )
    )


@router.post("/reply", response_model=ReplyResponse)
async def reply(
    request: ReplyAPIRequest,
    reply_use_case: FromDishka[ReplyUseCase],
) -> ReplyResponse:
    """Reply to a cast."""
    return await reply_use_case.execute(
        ReplyRequest(
            text=request.text,
            signer_uuid=request.signer_uuid,
            parent_hash=request.parent_hash,
        )
    )


@router.post("/like", response_model=ReactResponse)
async def like(
    request: ReactionAPIRequest,
    react_use_case: FromDishka[ReactUseCase],
) -> ReactResponse:
    """Like a cast."""
    return await react_use_case.execute(
        ReactRequest(
            reaction_type=ReactionType.LIKE,
            cast_hash=request.cast_hash,
            signer_uuid=request.signer_uuid,
        )
    )


@router.delete("/like", response_model=UnreactResponse)
async def unlike(
    unreact_use_case: FromDishka[UnreactUseCase],
    cast_hash: str | None = Query(default=None, alias="castHash"),
    signer_uuid: str | None = Query(default=None, alias="signerUuid"),
) -> UnreactResponse:
    """Remove a like."""
    return await unreact_use_case.execute(
        ReactRequest(
            reaction_type=ReactionType.LIKE,
            cast_hash=cast_hash,
            signer_uuid=signer_uuid,
        )
    )


@router.post("/recast", response_model=ReactResponse)
async def recast(
    request: ReactionAPIRequest,
    react_use_case: FromDishka[ReactUseCase],
) -> ReactResponse:
    """Recast a cast."""
    return await react_use_case.execute(
        ReactRequest(
            reaction_type=ReactionType.RECAST,
            cast_hash=request.cast_hash,
            signer_uuid=request.signer_uuid,
        )
    )


@router.delete("/recast", response_model=UnreactResponse)
async def unrecast(
    unreact_use_case: FromDishka[UnreactUseCase],
    cast_hash: str | None = Query(default=None, alias="castHash"),
    signer_uuid: str | None = Query(default=None, alias="signerUuid"),
) -> UnreactResponse:
    """Remove a recast."""
    return await unreact_use_case.execute(
        ReactRequest(
            reaction_type=ReactionType.RECAST,
            cast_hash=cast_hash,
            signer_uuid=signer_uuid,
        )
    )
