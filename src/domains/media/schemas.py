from core.schemas import CamelModel


class UploadResponse(CamelModel):
    url: str
    public_id: str
