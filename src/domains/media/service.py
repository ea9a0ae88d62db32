import structlog
from fastapi import UploadFile

from core.config import settings
from domains.media.client import CloudinaryClient, UploadResult
from domains.media.exceptions import (
    ImageTooLargeException,
    InvalidImageTypeException,
    MissingImageException,
)

logger = structlog.get_logger(__name__)


class MediaService:
    def __init__(self, client: CloudinaryClient, max_bytes: int | None = None):
        self.client = client
        self.max_bytes = max_bytes or settings.MAX_UPLOAD_BYTES

    async def upload_image(self, file: UploadFile | None) -> UploadResult:
        if not file or not file.filename:
            raise MissingImageException()

        content_type = file.content_type or ""
        if not content_type.startswith("image/"):
            raise InvalidImageTypeException()

        # se lee un byte de más para detectar archivos por encima del límite
        content = await file.read(self.max_bytes + 1)

        if len(content) > self.max_bytes:
            raise ImageTooLargeException()

        if not content:
            raise MissingImageException("El archivo está vacío")

        result = await self.client.upload(content, content_type)
        logger.info("image_uploaded", public_id=result.public_id, size=len(content))

        return result
