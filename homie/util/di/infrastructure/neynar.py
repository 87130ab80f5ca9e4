"""Neynar infrastructure providers."""

from dishka import Scope, provide

from homie.adapter.neynar import RealNeynarClient
from homie.config import Settings
from homie.domain.service import FarcasterApi
from homie.util.di.base import ProviderBase


class NeynarProvider(ProviderBase):
    """Neynar component base."""

    __mock_component__ = "neynar"


class ProdNeynarProvider(NeynarProvider):
    """Production Neynar provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_neynar_client(self, settings: Settings) -> FarcasterApi:
        """Provide Neynar hosted API client.

        A missing API key is reported per request as a ConfigurationError,
        so health checks and non-Neynar routes keep working.
        """
        return RealNeynarClient(
            api_key=settings.neynar.api_key,
            base_url=settings.neynar.base_url,
            timeout=settings.neynar.timeout,
        )
