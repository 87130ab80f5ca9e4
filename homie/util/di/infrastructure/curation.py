"""Curation preferences server infrastructure providers."""

from dishka import Scope, provide

from homie.adapter.curation import RealCurationClient
from homie.config import Settings
from homie.domain.service import PreferenceStore
from homie.util.di.base import ProviderBase


class CurationProvider(ProviderBase):
    """Curation component base."""

    __mock_component__ = "curation"


class ProdCurationProvider(CurationProvider):
    """Production curation provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_curation_client(self, settings: Settings) -> PreferenceStore:
        """Provide preferences server client."""
        return RealCurationClient(
            server_url=settings.curation.server_url,
            timeout=settings.curation.timeout,
        )
