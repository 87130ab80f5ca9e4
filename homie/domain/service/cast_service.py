"""Cast publishing domain service.

Two strategies share one contract, "submit an authored message and
return its hash":

- hosted: the hosted API signs with a managed signer and submits
- direct: the message is built and signed locally and posted to a hub

Every input is validated before any network call is made.
"""

from typing import Any

import logfire

from homie.domain.error import AuthError
from homie.domain.model import CastDraft, PublishedCast
from homie.domain.service.farcaster_api import FarcasterApi
from homie.domain.service.signer_service import SignerService
from homie.domain.validation import (
    validate_cast_text,
    validate_channel_key,
    validate_embeds,
    validate_hash,
    validate_optional_fid,
    validate_url,
)
from homie.domain.value import ReactionType
from homie.util.redact import truncate_id

from .base import Service


class HubSubmitter:
    """Submits locally signed messages to a Farcaster hub."""

    async def submit_cast(
        self, fid: int, draft: CastDraft, private_key: str
    ) -> PublishedCast:
        """Build, sign and submit a CastAdd message.

        The hub is the authority on whether ``private_key`` is a registered
        signer for ``fid``; nothing is checked locally.

        Args:
            fid: Author FID
            draft: Validated cast content
            private_key: Ed25519 private key as hex

        Returns:
            Published cast with its protocol hash

        Raises:
            UpstreamError: If the hub rejects the message
        """
        raise NotImplementedError


def _hosted_payload(signer_uuid: str, draft: CastDraft) -> dict[str, Any]:
    payload: dict[str, Any] = {"signer_uuid": signer_uuid, "text": draft.text}
    if draft.embeds:
        payload["embeds"] = [embed.model_dump() for embed in draft.embeds]
    if draft.parent:
        payload["parent"] = draft.parent
    if draft.channel_key:
        payload["channel_key"] = draft.channel_key
    return payload


class CastService(Service):
    """Domain service for casts, replies and reactions."""

    def __init__(
        self,
        farcaster_api: FarcasterApi,
        hub_submitter: HubSubmitter,
        signer_service: SignerService,
        bot_signer_uuid: str | None = None,
    ) -> None:
        """Initialize cast service.

        Args:
            farcaster_api: Hosted API for managed-signer publishing
            hub_submitter: Direct hub submission
            signer_service: Used to check signer approval before publishing
            bot_signer_uuid: Application signer used when the caller has none
        """
        self.farcaster_api = farcaster_api
        self.hub_submitter = hub_submitter
        self.signer_service = signer_service
        self.bot_signer_uuid = bot_signer_uuid

    def build_draft(
        self,
        text: Any,
        embeds: Any = None,
        parent: str | None = None,
        channel_key: str | None = None,
    ) -> CastDraft:
        """Validate raw cast input into a draft.

        ``parent`` may be a cast hash (reply) or a URL (channel/parent URL).

        Raises:
            ValidationError: If any part of the cast is malformed
        """
        clean_text = validate_cast_text(text)
        clean_embeds = validate_embeds(embeds)

        clean_parent = None
        if parent:
            if parent.startswith("0x"):
                clean_parent = validate_hash(parent, "parent")
            else:
                clean_parent = validate_url(parent, "parent")

        clean_channel = validate_channel_key(channel_key) if channel_key else None

        return CastDraft(
            text=clean_text,
            embeds=clean_embeds,
            parent=clean_parent,
            channel_key=clean_channel,
        )

    async def publish_direct(
        self,
        text: Any,
        fid: Any,
        private_key: str | None,
        embeds: Any = None,
    ) -> PublishedCast:
        """Publish by signing a message locally and submitting it to a hub.

        Raises:
            ValidationError: If the text or embeds are invalid
            AuthError: ``no_user`` without an FID, ``no_signer`` without a key
            UpstreamError: If the hub rejects the submission
        """
        draft = self.build_draft(text, embeds)

        author_fid = validate_optional_fid(fid)
        if author_fid is None:
            raise AuthError.no_user()
        if not private_key or not private_key.strip():
            raise AuthError.no_signer()

        with logfire.span("cast_service.publish_direct", fid=author_fid):
            published = await self.hub_submitter.submit_cast(
                fid=author_fid, draft=draft, private_key=private_key.strip()
            )
            logfire.info("Cast submitted to hub", fid=author_fid, hash=published.hash)
            return published

    async def publish_hosted(
        self, draft: CastDraft, signer_uuid: str | None
    ) -> dict[str, Any]:
        """Publish through the hosted API with an approved signer.

        Raises:
            AuthError: ``no_signer`` without a signer, or if it is not approved
            UpstreamError: If the hosted API rejects the cast
        """
        if not signer_uuid:
            raise AuthError.no_signer()

        with logfire.span(
            "cast_service.publish_hosted", signer_uuid=truncate_id(signer_uuid)
        ):
            await self.signer_service.require_approved(signer_uuid)

            cast = await self.farcaster_api.publish_cast(
                _hosted_payload(signer_uuid, draft)
            )
            logfire.info(
                "Cast published",
                signer_uuid=truncate_id(signer_uuid),
                hash=cast.get("hash"),
                is_reply=draft.parent is not None,
            )
            return cast

    async def publish_with_fallback(
        self, draft: CastDraft, signer_uuid: str | None = None
    ) -> dict[str, Any]:
        """Publish with the caller's signer, falling back to the bot signer."""
        chosen = signer_uuid or self.bot_signer_uuid
        if not signer_uuid and chosen:
            logfire.info("No signer supplied, using bot signer")
        return await self.publish_hosted(draft, chosen)

    async def reply(
        self, text: Any, signer_uuid: str | None, parent_hash: Any
    ) -> dict[str, Any]:
        """Publish a reply to an existing cast."""
        parent = validate_hash(parent_hash, "parentHash")
        draft = self.build_draft(text, parent=parent)
        return await self.publish_hosted(draft, signer_uuid)

    async def react(
        self, reaction_type: ReactionType, cast_hash: Any, signer_uuid: str | None
    ) -> dict[str, Any]:
        """Add a like or recast."""
        target = validate_hash(cast_hash, "castHash")
        if not signer_uuid:
            raise AuthError.no_signer()

        with logfire.span(
            "cast_service.react",
            reaction_type=reaction_type.value,
            signer_uuid=truncate_id(signer_uuid),
        ):
            await self.signer_service.require_approved(signer_uuid)
            result = await self.farcaster_api.publish_reaction(
                signer_uuid, reaction_type, target
            )
            logfire.info("Reaction added", reaction_type=reaction_type.value, target=target)
            return result

    async def unreact(
        self, reaction_type: ReactionType, cast_hash: Any, signer_uuid: str | None
    ) -> dict[str, Any]:
        """Remove a like or recast."""
        target = validate_hash(cast_hash, "castHash")
        if not signer_uuid:
            raise AuthError.no_signer()

        with logfire.span(
            "cast_service.unreact",
            reaction_type=reaction_type.value,
            signer_uuid=truncate_id(signer_uuid),
        ):
            await self.signer_service.require_approved(signer_uuid)
            result = await self.farcaster_api.delete_reaction(
                signer_uuid, reaction_type, target
            )
            logfire.info(
                "Reaction removed", reaction_type=reaction_type.value, target=target
            )
            return result
