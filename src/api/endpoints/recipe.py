from uuid import UUID

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from core.di import get_recipe_service
from domains.media.exceptions import (
    ImageTooLargeException,
    InvalidImageTypeException,
    UploadFailedException,
)
from domains.recipe.exceptions import NothingToUpdateException, RecipeNotFoundException
from domains.recipe.schemas import (
    RecipeCreateRequest,
    RecipeResponse,
    RecipeUpdateRequest,
    parse_recipe_form,
)
from domains.recipe.service import RecipeService
from util.docs import create_error_response

router = APIRouter()


@router.get(
    "",
    status_code=200,
    summary="Listar recetas (más recientes primero)",
    response_model=list[RecipeResponse],
)
async def get_recipes(service: RecipeService = Depends(get_recipe_service)):
    return await service.get_recipes()


@router.post(
    "",
    status_code=201,
    summary="Crear receta",
    response_model=RecipeResponse,
)
async def create_recipe(
    request: RecipeCreateRequest,
    service: RecipeService = Depends(get_recipe_service),
):
    return await service.create_recipe(request)


@router.post(
    "/with-image",
    status_code=201,
    summary="Crear receta con imagen (multipart)",
    response_model=RecipeResponse,
    responses=create_error_response(
        InvalidImageTypeException,
        ImageTooLargeException,
        UploadFailedException,
    ),
)
async def create_recipe_with_image(
    req: Request,
    service: RecipeService = Depends(get_recipe_service),
):
    """
    Mismos campos que `POST /recipes` enviados como formulario; `ingredients` va como texto JSON.
    Si se adjunta `image`, la URL subida reemplaza a `imageUrl`.
    """
    form = await req.form()
    data, image = parse_recipe_form(form)

    try:
        request = RecipeCreateRequest.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    return await service.create_recipe_with_image(request, image)


@router.get(
    "/{recipe_id}",
    status_code=200,
    summary="Obtener receta",
    response_model=RecipeResponse,
    responses=create_error_response(RecipeNotFoundException),
)
async def get_recipe(recipe_id: UUID, service: RecipeService = Depends(get_recipe_service)):
    return await service.get_recipe(recipe_id)


@router.put(
    "/{recipe_id}",
    status_code=200,
    summary="Actualizar receta (parcial)",
    response_model=RecipeResponse,
    responses=create_error_response(NothingToUpdateException, RecipeNotFoundException),
)
async def update_recipe(
    recipe_id: UUID,
    request: RecipeUpdateRequest,
    service: RecipeService = Depends(get_recipe_service),
):
    return await service.update_recipe(recipe_id, request)


@router.delete(
    "/{recipe_id}",
    status_code=204,
    summary="Eliminar receta",
    responses=create_error_response(RecipeNotFoundException),
)
async def delete_recipe(recipe_id: UUID, service: RecipeService = Depends(get_recipe_service)):
    await service.delete_recipe(recipe_id)

