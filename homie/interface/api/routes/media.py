"""Media upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, UploadFile

from homie.application.usecase.media import (
    UploadImageRequest,
    UploadImageResponse,
    UploadImageUseCase,
)

router = APIRouter(tags=["media"], route_class=DishkaRoute)


@router.post("/upload-image", response_model=UploadImageResponse)
async def upload_image(
    upload_image_use_case: FromDishka[UploadImageUseCase],
    file: UploadFile | None = File(default=None),
) -> UploadImageResponse:
    """Upload an image to embed in a cast.

    Accepts a multipart ``file`` field; JPEG, PNG, GIF and WebP only.
    """
    if file is None:
        request = UploadImageRequest()
    else:
        request = UploadImageRequest(
            content=await file.read(),
            content_type=file.content_type,
            filename=file.filename,
        )
    return await upload_image_use_case.execute(request)
