"""Farcaster hub client for direct message submission.

Messages are built and signed locally and posted to the hub's HTTP API as
serialized protobuf. The hash is the first 20 bytes of the BLAKE3 digest of
the encoded ``MessageData``; the signature is Ed25519 over that hash.
"""

import secrets
from datetime import datetime

import httpx
import logfire
from blake3 import blake3
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from homie.adapter.error import UpstreamError
from homie.adapter.farcaster.protocol import (
    FARCASTER_NETWORK_MAINNET,
    HASH_SCHEME_BLAKE3,
    MESSAGE_TYPE_CAST_ADD,
    SIGNATURE_SCHEME_ED25519,
    Message,
    MessageData,
    farcaster_timestamp,
)
from homie.domain.error import ValidationError
from homie.domain.model import CastDraft, PublishedCast
from homie.domain.service.cast_service import HubSubmitter
from homie.domain.value import Fid

SERVICE_NAME = "hub"

HASH_LENGTH = 20
SEED_LENGTH = 32


def signing_key(private_key: str) -> Ed25519PrivateKey:
    """Load an Ed25519 signer key from hex.

    Accepts the 32-byte seed, or the 64-byte seed-plus-public-key form that
    most Farcaster tooling exports (only the seed is used).

    Raises:
        ValidationError: If the key is not hex or has the wrong length
    """
    try:
        raw = bytes.fromhex(private_key.removeprefix("0x"))
    except ValueError:
        raise ValidationError("privateKey must be hex encoded", "privateKey")
    if len(raw) not in (SEED_LENGTH, 2 * SEED_LENGTH):
        raise ValidationError(
            "privateKey must be a 32-byte Ed25519 key", "privateKey"
        )
    return Ed25519PrivateKey.from_private_bytes(raw[:SEED_LENGTH])


def build_cast_message(
    fid: int, draft: CastDraft, private_key: str, now: datetime | None = None
):
    """Build and sign a CastAdd message for the mainnet network.

    Args:
        fid: Author FID
        draft: Validated cast content
        private_key: Ed25519 signer private key as hex
        now: Message timestamp (defaults to the wall clock)

    Returns:
        Signed protobuf ``Message``
    """
    key = signing_key(private_key)

    data = MessageData(
        type=MESSAGE_TYPE_CAST_ADD,
        fid=fid,
        timestamp=farcaster_timestamp(now),
        network=FARCASTER_NETWORK_MAINNET,
    )
    body = data.cast_add_body
    body.text = draft.text
    for embed in draft.embeds:
        body.embeds.add(url=embed.url)
    if draft.parent and not draft.parent.startswith("0x"):
        body.parent_url = draft.parent

    digest = blake3(data.SerializeToString()).digest()[:HASH_LENGTH]
    return Message(
        data=data,
        hash=digest,
        hash_scheme=HASH_SCHEME_BLAKE3,
        signature=key.sign(digest),
        signature_scheme=SIGNATURE_SCHEME_ED25519,
        signer=key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw),
    )


class HubClient(HubSubmitter):
    """Base class for hub clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealHubClient(HubClient):
    """Submits messages to a hub's HTTP API."""

    def __init__(self, hub_url: str, timeout: float = 15.0) -> None:
        """Initialize hub client.

        Args:
            hub_url: Hub HTTP API root, e.g. ``https://hub.pinata.cloud``
            timeout: Request timeout in seconds
        """
        self.hub_url = hub_url.rstrip("/")
        self.timeout = timeout

    async def submit_cast(
        self, fid: int, draft: CastDraft, private_key: str
    ) -> PublishedCast:
        message = build_cast_message(fid, draft, private_key)
        cast_hash = f"0x{message.hash.hex()}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.hub_url}/v1/submitMessage",
                    content=message.SerializeToString(),
                    headers={"Content-Type": "application/octet-stream"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Hub HTTP error", fid=fid, error=str(e))
            raise UpstreamError(SERVICE_NAME, 502, str(e))

        if not response.is_success:
            logfire.error(
                "Hub rejected message",
                fid=fid,
                status_code=response.status_code,
                error=response.text,
            )
            raise UpstreamError(SERVICE_NAME, response.status_code, response.text)

        return PublishedCast(hash=cast_hash, author_fid=Fid(fid), text=draft.text)


class MockHubClient(HubClient):
    """Mock hub client for testing.

    Checks the signer key like the real client, then records the submission
    without signing or sending anything.
    """

    def __init__(self):
        self.submitted: list[tuple[int, CastDraft]] = []

    async def submit_cast(
        self, fid: int, draft: CastDraft, private_key: str
    ) -> PublishedCast:
        signing_key(private_key)
        self.submitted.append((fid, draft))
        return PublishedCast(
            hash=f"0x{secrets.token_hex(20)}", author_fid=Fid(fid), text=draft.text
        )
