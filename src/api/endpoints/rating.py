from uuid import UUID

from fastapi import APIRouter, Depends

from core.di import get_rating_service
from domains.rating.schemas import (
    RatingRequest,
    RatingResponse,
    RatingSummaryResponse,
    UserRatingResponse,
)
from domains.rating.service import RatingService

router = APIRouter()


@router.get(
    "/recipes/{recipe_id}/ratings",
    status_code=200,
    summary="Promedio y cantidad de valoraciones de una receta",
    response_model=RatingSummaryResponse,
)
async def get_rating_summary(recipe_id: UUID, service: RatingService = Depends(get_rating_service)):
    return await service.get_summary(recipe_id)


@router.get(
    "/users/{user_id}/ratings/{recipe_id}",
    status_code=200,
    summary="Valoración del usuario para una receta",
    response_model=UserRatingResponse,
)
async def get_user_rating(
    user_id: UUID,
    recipe_id: UUID,
    service: RatingService = Depends(get_rating_service),
):
    return await service.get_user_rating(user_id, recipe_id)


@router.put(
    "/users/{user_id}/ratings/{recipe_id}",
    status_code=200,
    summary="Crear o actualizar valoración",
    response_model=RatingResponse,
)
async def rate_recipe(
    user_id: UUID,
    recipe_id: UUID,
    request: RatingRequest,
    service: RatingService = Depends(get_rating_service),
):
    return await service.rate_recipe(user_id, recipe_id, request)


@router.delete(
    "/users/{user_id}/ratings/{recipe_id}",
    status_code=204,
    summary="Eliminar valoración",
)
async def delete_rating(
    user_id: UUID,
    recipe_id: UUID,
    service: RatingService = Depends(get_rating_service),
):
    await service.delete_rating(user_id, recipe_id)
