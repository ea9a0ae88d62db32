from uuid import UUID

from fastapi import APIRouter, Depends

from core.di import get_recipe_service, get_user_service
from domains.recipe.schemas import RecipeResponse
from domains.recipe.service import RecipeService
from domains.user.exceptions import (
    IncorrectPasswordException,
    PasswordNotSetException,
    UserNotFoundException,
)
from domains.user.schemas import (
    ChangePasswordRequest,
    MessageResponse,
    RenameUserRequest,
    UserResponse,
)
from domains.user.service import UserService
from util.docs import create_error_response

router = APIRouter()


@router.get(
    "/{user_id}",
    status_code=200,
    summary="Obtener usuario",
    response_model=UserResponse,
    responses=create_error_response(UserNotFoundException),
)
async def get_user(user_id: UUID, user_service: UserService = Depends(get_user_service)):
    return await user_service.get_user(user_id)


@router.put(
    "/{user_id}",
    status_code=200,
    summary="Cambiar el nombre del usuario",
    response_model=UserResponse,
    responses=create_error_response(UserNotFoundException),
)
async def rename_user(
    user_id: UUID,
    request: RenameUserRequest,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.rename_user(user_id, request)


@router.put(
    "/{user_id}/password",
    status_code=200,
    summary="Cambiar contraseña (requiere la actual)",
    response_model=MessageResponse,
    responses=create_error_response(
        UserNotFoundException,
        PasswordNotSetException,
        IncorrectPasswordException,
    ),
)
async def change_password(
    user_id: UUID,
    request: ChangePasswordRequest,
    user_service: UserService = Depends(get_user_service),
):
    await user_service.change_password(user_id, request)
    return {"message": "Contraseña actualizada correctamente"}


@router.get(
    "/{user_id}/recipes",
    status_code=200,
    summary="Recetas publicadas por el usuario",
    response_model=list[RecipeResponse],
)
async def get_user_recipes(user_id: UUID, service: RecipeService = Depends(get_recipe_service)):
    return await service.get_user_recipes(user_id)
