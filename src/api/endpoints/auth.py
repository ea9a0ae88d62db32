from fastapi import APIRouter, Depends

from core.di import get_user_service
from domains.user.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
    PasswordNotSetException,
)
from domains.user.schemas import LogInRequest, RegisterRequest, UserResponse
from domains.user.service import UserService
from util.docs import create_error_response

router = APIRouter()


@router.post(
    "/register",
    status_code=201,
    summary="Registro",
    response_model=UserResponse,
    responses=create_error_response(DuplicateEmailException),
)
async def register(request: RegisterRequest, user_service: UserService = Depends(get_user_service)):
    return await user_service.sign_up(request)


@router.post(
    "/login",
    status_code=200,
    summary="Inicio de sesión",
    response_model=UserResponse,
    responses=create_error_response(InvalidCredentialsException, PasswordNotSetException),
)
async def log_in(request: LogInRequest, user_service: UserService = Depends(get_user_service)):
    """
    Devuelve el usuario sin el hash de la contraseña.
    """
    return await user_service.log_in(request)
