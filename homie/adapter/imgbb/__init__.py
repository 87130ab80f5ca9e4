"""imgbb image hosting adapter."""

from .client import ImgbbClient, MockImgbbClient, RealImgbbClient

__all__ = ["ImgbbClient", "RealImgbbClient", "MockImgbbClient"]
