from uuid import UUID

from fastapi import APIRouter, Depends

from core.di import get_my_recipe_service
from domains.collection.schemas import CollectionAddRequest, CollectionEntryResponse
from domains.collection.service import CollectionService

router = APIRouter()


@router.get(
    "/{user_id}/my-recipes",
    status_code=200,
    summary="Recetas guardadas del usuario",
    response_model=list[CollectionEntryResponse],
)
async def get_my_recipes(user_id: UUID, service: CollectionService = Depends(get_my_recipe_service)):
    return await service.get_entries(user_id)


@router.post(
    "/{user_id}/my-recipes",
    status_code=201,
    summary="Guardar en mis recetas",
    response_model=CollectionEntryResponse,
)
async def add_my_recipe(
    user_id: UUID,
    request: CollectionAddRequest,
    service: CollectionService = Depends(get_my_recipe_service),
):
    """
    Agregar dos veces la misma receta no es un error: devuelve la entrada existente.
    """
    return await service.add_entry(user_id, request)


@router.delete(
    "/{user_id}/my-recipes/{recipe_id}",
    status_code=204,
    summary="Quitar de mis recetas",
)
async def remove_my_recipe(
    user_id: UUID,
    recipe_id: UUID,
    service: CollectionService = Depends(get_my_recipe_service),
):
    await service.remove_entry(user_id, recipe_id)
