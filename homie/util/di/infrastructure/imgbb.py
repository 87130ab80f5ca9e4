"""imgbb infrastructure providers."""

from dishka import Scope, provide

from homie.adapter.imgbb import RealImgbbClient
from homie.config import Settings
from homie.domain.service import ImageHost
from homie.util.di.base import ProviderBase


class ImgbbProvider(ProviderBase):
    """imgbb component base."""

    __mock_component__ = "imgbb"


class ProdImgbbProvider(ImgbbProvider):
    """Production imgbb provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_imgbb_client(self, settings: Settings) -> ImageHost:
        """Provide imgbb image hosting client."""
        return RealImgbbClient(
            api_key=settings.imgbb.api_key,
            upload_url=settings.imgbb.upload_url,
            timeout=settings.imgbb.timeout,
        )
