"""Reaction use cases (likes and recasts)."""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import CastService
from homie.domain.value import ReactionType


class ReactRequest(BaseModel):
    """Add or remove a reaction."""

    reaction_type: ReactionType
    cast_hash: Any = None
    signer_uuid: str | None = None


class ReactResponse(BaseModel):
    """Reaction added."""

    ok: bool = True
    data: Any


class UnreactResponse(BaseModel):
    """Reaction removed."""

    ok: bool = True


class ReactUseCase:
    """Use case for liking or recasting a cast."""

    def __init__(self, cast_service: CastService) -> None:
        self.cast_service = cast_service

    async def execute(self, request: ReactRequest) -> ReactResponse:
        """Add a reaction with an approved signer.

        Raises:
            ValidationError: If the cast hash is malformed
            AuthError: If the signer is missing or not approved
        """
        data = await self.cast_service.react(
            request.reaction_type, request.cast_hash, request.signer_uuid
        )
        return ReactResponse(data=data)


class UnreactUseCase:
    """Use case for undoing a like or recast."""

    def __init__(self, cast_service: CastService) -> None:
        self.cast_service = cast_service

    async def execute(self, request: ReactRequest) -> UnreactResponse:
        await self.cast_service.unreact(
            request.reaction_type, request.cast_hash, request.signer_uuid
        )
        return UnreactResponse()
