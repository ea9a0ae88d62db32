from core.schemas import CamelModel


class CategoryResponse(CamelModel):
    id: int
    name: str
