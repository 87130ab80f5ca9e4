"""Farcaster protocol infrastructure providers."""

from dishka import Scope, provide

from homie.adapter.farcaster import (
    MnemonicCustodySigner,
    RealHubClient,
    RealQuickAuthVerifier,
    RealSiwfVerifier,
)
from homie.config import Settings
from homie.domain.service import (
    HubSubmitter,
    SiwfVerifier,
    TokenVerifier,
    TypedDataSigner,
)
from homie.util.di.base import ProviderBase


class FarcasterProvider(ProviderBase):
    """Farcaster component base (hub, custody account, sign-in)."""

    __mock_component__ = "farcaster"


class ProdFarcasterProvider(FarcasterProvider):
    """Production Farcaster provider."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_hub_client(self, settings: Settings) -> HubSubmitter:
        """Provide hub client for direct message submission."""
        return RealHubClient(hub_url=settings.hub.url, timeout=settings.hub.timeout)

    @provide
    def get_custody_signer(self, settings: Settings) -> TypedDataSigner:
        """Provide app custody signer (account derived lazily from the mnemonic)."""
        return MnemonicCustodySigner(mnemonic=settings.farcaster.app_mnemonic)

    @provide
    def get_siwf_verifier(self, settings: Settings) -> SiwfVerifier:
        """Provide SIWF verifier backed by the Optimism IdRegistry."""
        return RealSiwfVerifier(
            rpc_url=settings.farcaster.rpc_url, timeout=settings.farcaster.rpc_timeout
        )

    @provide
    def get_token_verifier(self, settings: Settings) -> TokenVerifier:
        """Provide Quick Auth session token verifier."""
        return RealQuickAuthVerifier(
            issuer=settings.auth.quick_auth_issuer,
            domain=settings.auth.quick_auth_domain,
            timeout=settings.auth.quick_auth_timeout,
        )
