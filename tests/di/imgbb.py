"""Mock imgbb providers for testing."""

from dishka import Scope, provide

from homie.adapter.imgbb import MockImgbbClient
from homie.domain.service import ImageHost
from homie.util.di.infrastructure.imgbb import ImgbbProvider


class MockImgbbProvider(ImgbbProvider):
    """Mock imgbb provider using a client that uploads nothing."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_imgbb_client(self) -> ImageHost:
        """Provide mock imgbb client."""
        return MockImgbbClient()
