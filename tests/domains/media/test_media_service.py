import pytest
from io import BytesIO
from unittest.mock import AsyncMock

from starlette.datastructures import Headers, UploadFile

from domains.media.client import UploadResult
from domains.media.exceptions import (
    ImageTooLargeException,
    InvalidImageTypeException,
    MissingImageException,
)
from domains.media.service import MediaService

MAX_BYTES = 5 * 1024 * 1024


def make_upload(content: bytes, filename="flan.png", content_type="image/png") -> UploadFile:
    return UploadFile(
        file=BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.mark.asyncio
class TestMediaService:
    @pytest.fixture
    def mock_client(self):
        client = AsyncMock()
        client.upload.return_value = UploadResult(url="https://cdn.recetas.com/flan.png", public_id="recetas/flan")
        return client

    @pytest.fixture
    def service(self, mock_client):
        return MediaService(mock_client, max_bytes=MAX_BYTES)

    async def test_upload_image(self, service, mock_client):
        result = await service.upload_image(make_upload(b"png"))

        assert result.url == "https://cdn.recetas.com/flan.png"
        mock_client.upload.assert_awaited_once_with(b"png", "image/png")

    async def test_image_at_limit_is_accepted(self, service, mock_client):
        await service.upload_image(make_upload(b"x" * MAX_BYTES))

        mock_client.upload.assert_awaited_once()

    async def test_image_over_limit(self, service, mock_client):
        with pytest.raises(ImageTooLargeException) as exc_info:
            await service.upload_image(make_upload(b"x" * (6 * 1024 * 1024)))

        assert exc_info.value.status_code == 413
        mock_client.upload.assert_not_called()

    async def test_non_image_file(self, service, mock_client):
        with pytest.raises(InvalidImageTypeException):
            await service.upload_image(make_upload(b"%PDF", filename="receta.pdf", content_type="application/pdf"))
        mock_client.upload.assert_not_called()

    async def test_missing_file(self, service):
        with pytest.raises(MissingImageException):
            await service.upload_image(None)

    async def test_empty_file(self, service, mock_client):
        with pytest.raises(MissingImageException):
            await service.upload_image(make_upload(b""))
        mock_client.upload.assert_not_called()
