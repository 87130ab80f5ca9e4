"""Media use cases."""

from .upload_image import UploadImageRequest, UploadImageResponse, UploadImageUseCase

__all__ = ["UploadImageRequest", "UploadImageResponse", "UploadImageUseCase"]
