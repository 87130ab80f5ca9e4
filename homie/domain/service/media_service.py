"""Media upload domain service."""

import logfire

from homie.domain.validation import validate_image_file
from homie.domain.value.common import ValueObject

from .base import Service


class UploadedImage(ValueObject):
    """Hosted image location."""

    url: str
    delete_url: str | None = None


class ImageHost:
    """Generic image hosting interface."""

    async def upload(self, content: bytes, filename: str | None = None) -> UploadedImage:
        """Upload raw image bytes.

        Raises:
            UpstreamError: If the host rejects the upload or returns no URL
        """
        raise NotImplementedError


class MediaService(Service):
    """Domain service for image uploads attached to casts."""

    def __init__(self, image_host: ImageHost, max_bytes: int) -> None:
        """Initialize media service.

        Args:
            image_host: Image hosting client
            max_bytes: Largest accepted upload
        """
        self.image_host = image_host
        self.max_bytes = max_bytes

    async def upload_image(
        self,
        content: bytes | None,
        content_type: str | None,
        filename: str | None = None,
    ) -> UploadedImage:
        """Validate and upload an image.

        Raises:
            ValidationError: If the file is missing, not an allowed type, or too large
        """
        validate_image_file(
            content_type,
            len(content) if content is not None else None,
            self.max_bytes,
        )

        with logfire.span(
            "media_service.upload_image", content_type=content_type, size=len(content)
        ):
            image = await self.image_host.upload(content, filename)
            logfire.info("Image uploaded", url=image.url)
            return image
