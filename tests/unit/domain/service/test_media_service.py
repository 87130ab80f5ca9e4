"""Unit tests for MediaService."""

import pytest

from homie.domain.error import ValidationError
from homie.domain.service import ImageHost, MediaService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUploadImage:
    @pytest.mark.asyncio
    async def test_uploads_valid_image(self, unit_env):
        media_service = await unit_env.get(MediaService)
        image_host = await unit_env.get(ImageHost)

        image = await media_service.upload_image(b"\x89PNG", "image/png", "cat.png")

        assert image.url.endswith("/cat.png")
        assert image.delete_url
        assert image_host.uploads == [b"\x89PNG"]

    @pytest.mark.asyncio
    async def test_rejects_before_upload(self, unit_env):
        media_service = await unit_env.get(MediaService)
        image_host = await unit_env.get(ImageHost)
        media_service.max_bytes = 3

        with pytest.raises(ValidationError, match="File size exceeds"):
            await media_service.upload_image(b"\x89PNG", "image/png", "cat.png")

        assert image_host.uploads == []

    @pytest.mark.asyncio
    async def test_missing_file(self, unit_env):
        media_service = await unit_env.get(MediaService)

        with pytest.raises(ValidationError, match="File is required"):
            await media_service.upload_image(None, None)
