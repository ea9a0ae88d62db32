from fastapi import APIRouter, Depends, File, UploadFile

from core.di import get_media_service
from domains.media.exceptions import (
    ImageTooLargeException,
    InvalidImageTypeException,
    MediaNotConfiguredException,
    MissingImageException,
    UploadFailedException,
)
from domains.media.schemas import UploadResponse
from domains.media.service import MediaService
from util.docs import create_error_response

router = APIRouter()


@router.post(
    "/upload",
    status_code=201,
    summary="Subir una imagen",
    response_model=UploadResponse,
    responses=create_error_response(
        MissingImageException,
        InvalidImageTypeException,
        ImageTooLargeException,
        MediaNotConfiguredException,
        UploadFailedException,
    ),
)
async def upload_image(
    image: UploadFile | None = File(None),
    service: MediaService = Depends(get_media_service),
):
    result = await service.upload_image(image)
    return UploadResponse.model_validate(result)
