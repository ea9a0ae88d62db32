from core.exception.exceptions import BaseCustomException


class MissingImageException(BaseCustomException):
    def __init__(self, detail: str = "No se envió ninguna imagen"):
        super().__init__(status_code=400, detail=detail, code="IMAGE_REQUIRED")


class InvalidImageTypeException(BaseCustomException):
    def __init__(self, detail: str = "Solo se permiten archivos de imagen"):
        super().__init__(status_code=400, detail=detail, code="INVALID_IMAGE_TYPE")


class ImageTooLargeException(BaseCustomException):
    def __init__(self, detail: str = "La imagen supera el tamaño máximo de 5 MB"):
        super().__init__(status_code=413, detail=detail, code="IMAGE_TOO_LARGE")


class MediaNotConfiguredException(BaseCustomException):
    def __init__(self, detail: str = "El servicio de imágenes no está configurado"):
        super().__init__(status_code=500, detail=detail, code="MEDIA_NOT_CONFIGURED")


class UploadFailedException(BaseCustomException):
    def __init__(self, detail: str = "Error al subir la imagen"):
        super().__init__(status_code=500, detail=detail, code="UPLOAD_FAILED")
