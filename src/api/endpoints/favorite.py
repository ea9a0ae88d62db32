from uuid import UUID

from fastapi import APIRouter, Depends

from core.di import get_favorite_service
from domains.collection.schemas import CollectionAddRequest, CollectionEntryResponse
from domains.collection.service import CollectionService

router = APIRouter()


@router.get(
    "/{user_id}/favorites",
    status_code=200,
    summary="Favoritos del usuario",
    response_model=list[CollectionEntryResponse],
)
async def get_favorites(user_id: UUID, service: CollectionService = Depends(get_favorite_service)):
    return await service.get_entries(user_id)


@router.post(
    "/{user_id}/favorites",
    status_code=201,
    summary="Agregar a favoritos",
    response_model=CollectionEntryResponse,
)
async def add_favorite(
    user_id: UUID,
    request: CollectionAddRequest,
    service: CollectionService = Depends(get_favorite_service),
):
    """
    Agregar dos veces la misma receta no es un error: devuelve el favorito existente.
    """
    return await service.add_entry(user_id, request)


@router.delete(
    "/{user_id}/favorites/{recipe_id}",
    status_code=204,
    summary="Quitar de favoritos",
)
async def remove_favorite(
    user_id: UUID,
    recipe_id: UUID,
    service: CollectionService = Depends(get_favorite_service),
):
    await service.remove_entry(user_id, recipe_id)
