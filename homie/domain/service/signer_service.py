"""Signer lifecycle domain service.

Signers move through ``generated -> pending_approval -> approved`` and may
later be ``revoked``. Approval happens out of band in the user's wallet;
this service only ever observes it by polling the hosted API.
"""

import time
from typing import Any

import logfire

from homie.domain.error import AuthError
from homie.domain.model import Signer
from homie.domain.service.farcaster_api import FarcasterApi
from homie.util.error import ConfigurationError
from homie.util.redact import truncate_id

from .base import Service

# EIP-712 domain of the SignedKeyRequestValidator contract on Optimism
SIGNED_KEY_REQUEST_DOMAIN: dict[str, Any] = {
    "name": "Farcaster SignedKeyRequestValidator",
    "version": "1",
    "chainId": 10,
    "verifyingContract": "0x00000000fc700472606ed4fa22623acf62c60553",
}

SIGNED_KEY_REQUEST_TYPES: dict[str, list[dict[str, str]]] = {
    "SignedKeyRequest": [
        {"name": "requestFid", "type": "uint256"},
        {"name": "key", "type": "bytes"},
        {"name": "deadline", "type": "uint256"},
    ],
}

KEY_REQUEST_TTL_SECONDS = 86400


class TypedDataSigner:
    """Signs EIP-712 typed data with the application's custody account."""

    def sign_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, list[dict[str, str]]],
        message: dict[str, Any],
    ) -> str:
        """Sign typed data.

        Returns:
            ``0x``-prefixed hex signature
        """
        raise NotImplementedError


def build_signed_key_request(
    app_fid: int, public_key: str, deadline: int
) -> dict[str, Any]:
    """Build the ``SignedKeyRequest`` message for a signer public key.

    Args:
        app_fid: FID of the requesting application
        public_key: Ed25519 public key as ``0x`` hex
        deadline: Unix timestamp after which the request is void

    Returns:
        EIP-712 message values
    """
    return {
        "requestFid": app_fid,
        "key": bytes.fromhex(public_key.removeprefix("0x")),
        "deadline": deadline,
    }


class SignerService(Service):
    """Domain service for creating, registering and polling signers."""

    def __init__(
        self,
        farcaster_api: FarcasterApi,
        typed_data_signer: TypedDataSigner,
        app_fid: int | None,
        app_mnemonic: str | None,
    ) -> None:
        """Initialize signer service.

        Args:
            farcaster_api: Hosted API that manages signers
            typed_data_signer: Custody account signer for key requests
            app_fid: FID of this application
            app_mnemonic: Custody mnemonic (only its presence is checked here)
        """
        self.farcaster_api = farcaster_api
        self.typed_data_signer = typed_data_signer
        self.app_fid = app_fid
        self.app_mnemonic = app_mnemonic

    def _require_app_identity(self) -> int:
        if not self.app_fid:
            logfire.error("Signer registration unavailable: app FID not configured")
            raise ConfigurationError("FARCASTER__APP_FID not configured")
        if not self.app_mnemonic:
            logfire.error("Signer registration unavailable: app mnemonic not configured")
            raise ConfigurationError("FARCASTER__APP_MNEMONIC not configured")
        return self.app_fid

    async def create_signer(self) -> Signer:
        """Create a new signer in the ``generated`` state."""
        with logfire.span("signer_service.create_signer"):
            signer = await self.farcaster_api.create_signer()
            logfire.info(
                "Signer created",
                signer_uuid=truncate_id(signer.signer_uuid),
                status=signer.status.value,
            )
            return signer

    async def register_signer(
        self, signer_uuid: str, public_key: str, now: float | None = None
    ) -> Signer:
        """Register a generated signer with an app-signed key request.

        Args:
            signer_uuid: Signer handle from ``create_signer``
            public_key: Signer public key as ``0x`` hex
            now: Current unix time (defaults to the wall clock)

        Returns:
            Signer in ``pending_approval`` carrying the approval URL

        Raises:
            ConfigurationError: If the app FID or mnemonic is missing
        """
        app_fid = self._require_app_identity()

        with logfire.span(
            "signer_service.register_signer", signer_uuid=truncate_id(signer_uuid)
        ):
            deadline = int(now if now is not None else time.time()) + KEY_REQUEST_TTL_SECONDS
            signature = self.typed_data_signer.sign_typed_data(
                domain=SIGNED_KEY_REQUEST_DOMAIN,
                types=SIGNED_KEY_REQUEST_TYPES,
                message=build_signed_key_request(app_fid, public_key, deadline),
            )

            signer = await self.farcaster_api.register_signed_key(
                signer_uuid=signer_uuid,
                app_fid=app_fid,
                deadline=deadline,
                signature=signature,
            )
            logfire.info(
                "Signer key request submitted",
                signer_uuid=truncate_id(signer.signer_uuid),
                status=signer.status.value,
                deadline=deadline,
            )
            return signer

    async def create_and_register(self) -> Signer:
        """Create a signer and immediately submit its key request.

        Configuration is checked before anything is created upstream.
        """
        self._require_app_identity()
        signer = await self.create_signer()
        return await self.register_signer(signer.signer_uuid, signer.public_key)

    async def get_signer_status(self, signer_uuid: str) -> Signer:
        """Poll the current state of a signer."""
        with logfire.span(
            "signer_service.get_signer_status", signer_uuid=truncate_id(signer_uuid)
        ):
            signer = await self.farcaster_api.lookup_signer(signer_uuid)
            logfire.info(
                "Signer status polled",
                signer_uuid=truncate_id(signer_uuid),
                status=signer.status.value,
            )
            return signer

    async def require_approved(self, signer_uuid: str) -> Signer:
        """Return the signer only if it may publish.

        Raises:
            AuthError: If the signer is not ``approved``
        """
        signer = await self.get_signer_status(signer_uuid)
        if not signer.can_publish:
            logfire.warn(
                "Signer not approved for publishing",
                signer_uuid=truncate_id(signer_uuid),
                status=signer.status.value,
            )
            raise AuthError(
                f"Signer is {signer.status.value}, not approved",
                status_code=403,
                code="signer_not_approved",
            )
        return signer
