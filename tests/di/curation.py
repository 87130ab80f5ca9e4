"""Mock preferences server providers for testing."""

from dishka import Scope, provide

from homie.adapter.curation import MockCurationClient
from homie.domain.service import PreferenceStore
from homie.util.di.infrastructure.curation import CurationProvider


class MockCurationProvider(CurationProvider):
    """Mock curation provider using an in-memory preference store."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_curation_client(self) -> PreferenceStore:
        """Provide mock preferences client."""
        return MockCurationClient()
