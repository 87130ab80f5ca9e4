"""Upload image use case."""

from pydantic import BaseModel, ConfigDict, Field

from homie.domain.service import MediaService


class UploadImageRequest(BaseModel):
    """Raw upload as received from a multipart form."""

    content: bytes | None = None
    content_type: str | None = None
    filename: str | None = None


class UploadImageResponse(BaseModel):
    """Hosted image location."""

    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    url: str
    delete_url: str | None = Field(default=None, alias="deleteUrl")


class UploadImageUseCase:
    """Use case for hosting an image that will be embedded in a cast."""

    def __init__(self, media_service: MediaService) -> None:
        self.media_service = media_service

    async def execute(self, request: UploadImageRequest) -> UploadImageResponse:
        """Validate and upload the image.

        Raises:
            ValidationError: If the file is missing, the wrong type, or too large
            UpstreamError: If the image host fails
        """
        image = await self.media_service.upload_image(
            request.content, request.content_type, request.filename
        )
        return UploadImageResponse(url=image.url, delete_url=image.delete_url)
