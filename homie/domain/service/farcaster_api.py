"""Hosted Farcaster API interface.

The hosted API (Neynar) manages signers, publishes on their behalf and
serves every read endpoint. Responses other than signers are relayed to
clients with minimal reshaping, so they are returned as plain JSON objects.
"""

from typing import Any

from homie.domain.model import Signer
from homie.domain.value import ReactionType


class FarcasterApi:
    """Generic hosted Farcaster API interface."""

    # Signers

    async def create_signer(self) -> Signer:
        """Request a new app-scoped keypair."""
        raise NotImplementedError

    async def register_signed_key(
        self, signer_uuid: str, app_fid: int, deadline: int, signature: str
    ) -> Signer:
        """Submit the EIP-712 signed key request for a generated signer.

        Returns:
            Signer in ``pending_approval`` with its approval URL
        """
        raise NotImplementedError

    async def lookup_signer(self, signer_uuid: str) -> Signer:
        """Fetch the current state of a signer."""
        raise NotImplementedError

    # Writes

    async def publish_cast(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Publish a cast through a managed signer.

        Args:
            payload: ``{signer_uuid, text, embeds?, parent?, channel_key?}``

        Returns:
            Cast object assigned by the network (includes ``hash``)
        """
        raise NotImplementedError

    async def publish_reaction(
        self, signer_uuid: str, reaction_type: ReactionType, target: str
    ) -> dict[str, Any]:
        raise NotImplementedError

    async def delete_reaction(
        self, signer_uuid: str, reaction_type: ReactionType, target: str
    ) -> dict[str, Any]:
        raise NotImplementedError

    # Reads

    async def fetch_feed(self, params: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError

    async def fetch_trending(self, params: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError

    async def fetch_notifications(self, fid: int, limit: int) -> dict[str, Any]:
        raise NotImplementedError

    async def fetch_user_channels(self, fid: int, limit: int) -> dict[str, Any]:
        raise NotImplementedError

    async def fetch_channel_list(self, limit: int) -> dict[str, Any]:
        raise NotImplementedError

    async def fetch_following(self, fid: int, limit: int) -> dict[str, Any]:
        raise NotImplementedError

    async def fetch_user_by_username(self, username: str) -> dict[str, Any] | None:
        """Look up a user by username.

        Returns:
            User object, or None if the username is unknown
        """
        raise NotImplementedError

    async def fetch_users_bulk(self, fids: list[int]) -> list[dict[str, Any]]:
        raise NotImplementedError

    async def fetch_user_casts(self, fid: int, limit: int) -> dict[str, Any]:
        raise NotImplementedError

    async def search_users(self, query: str, limit: int) -> list[dict[str, Any]]:
        raise NotImplementedError
