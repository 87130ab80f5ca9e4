"""imgbb image hosting client."""

import base64
import secrets

import httpx
import logfire

from homie.adapter.error import UpstreamError
from homie.domain.service.media_service import ImageHost, UploadedImage
from homie.util.error import ConfigurationError

SERVICE_NAME = "imgbb"


class ImgbbClient(ImageHost):
    """Base class for imgbb clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealImgbbClient(ImgbbClient):
    """Uploads base64-encoded images to imgbb."""

    def __init__(
        self,
        api_key: str | None,
        upload_url: str = "https://api.imgbb.com/1/upload",
        timeout: float = 30.0,
    ) -> None:
        self.api_key = api_key
        self.upload_url = upload_url
        self.timeout = timeout

    async def upload(self, content: bytes, filename: str | None = None) -> UploadedImage:
        if not self.api_key:
            logfire.error("imgbb API key not configured")
            raise ConfigurationError("IMGBB__API_KEY not configured")

        form = {"key": self.api_key, "image": base64.b64encode(content).decode("ascii")}
        if filename:
            form["name"] = filename

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.upload_url, data=form, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("imgbb HTTP error", error=str(e))
            raise UpstreamError(SERVICE_NAME, 502, str(e))

        if not response.is_success:
            logfire.error(
                "imgbb upload failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise UpstreamError(SERVICE_NAME, response.status_code, response.text)

        data = response.json().get("data") or {}
        if not data.get("url"):
            logfire.error("imgbb upload returned no URL")
            raise UpstreamError(
                SERVICE_NAME, 502, "Upload succeeded but no URL returned"
            )

        return UploadedImage(url=data["url"], delete_url=data.get("delete_url"))


class MockImgbbClient(ImgbbClient):
    """Mock imgbb client returning deterministic-looking URLs."""

    def __init__(self):
        self.uploads: list[bytes] = []

    async def upload(self, content: bytes, filename: str | None = None) -> UploadedImage:
        self.uploads.append(content)
        image_id = secrets.token_hex(4)
        return UploadedImage(
            url=f"https://i.ibb.co/{image_id}/{filename or 'image'}",
            delete_url=f"https://ibb.co/{image_id}/delete",
        )
