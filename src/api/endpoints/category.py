from fastapi import APIRouter, Depends

from core.di import get_category_service
from domains.category.schemas import CategoryResponse
from domains.category.service import CategoryService

router = APIRouter()


@router.get(
    "",
    status_code=200,
    summary="Listar categorías",
    response_model=list[CategoryResponse],
)
async def get_categories(service: CategoryService = Depends(get_category_service)):
    return await service.get_categories()
