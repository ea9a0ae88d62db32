from uuid import UUID

import structlog

from core import security
from domains.user.exceptions import (
    DuplicateEmailException,
    IncorrectPasswordException,
    InvalidCredentialsException,
    PasswordNotSetException,
    UserNotFoundException,
)
from domains.user.repository import UserRepository
from domains.user.schemas import (
    ChangePasswordRequest,
    LogInRequest,
    RegisterRequest,
    RenameUserRequest,
    UserResponse,
)

logger = structlog.get_logger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def sign_up(self, request: RegisterRequest) -> UserResponse:
        if await self.user_repo.email_exists(request.email):
            raise DuplicateEmailException()

        password_hash = security.hash_password(request.password)

        saved_user = await self.user_repo.save_user(
            name=request.name,
            email=request.email,
            password_hash=password_hash,
            avatar_url=request.avatar_url,
        )
        logger.info("user_registered", user_id=str(saved_user["id"]))

        return UserResponse.model_validate(saved_user)

    async def log_in(self, request: LogInRequest) -> UserResponse:
        row = await self.user_repo.get_user_credentials(request.email)

        # email desconocido y contraseña incorrecta responden igual (401)
        if not row:
            logger.info("login_failed", reason="unknown_email")
            raise InvalidCredentialsException()

        password_hash = row.pop("password_hash", None)
        if not password_hash:
            raise PasswordNotSetException()

        if not security.verify_password(request.password, password_hash):
            logger.info("login_failed", reason="password_mismatch", user_id=str(row["id"]))
            raise InvalidCredentialsException()

        return UserResponse.model_validate(row)

    async def get_user(self, user_id: UUID) -> UserResponse:
        user = await self.user_repo.get_user_by_id(user_id)

        if not user:
            raise UserNotFoundException()
        return UserResponse.model_validate(user)

    async def rename_user(self, user_id: UUID, request: RenameUserRequest) -> UserResponse:
        user = await self.user_repo.update_name(user_id, request.name)

        if not user:
            raise UserNotFoundException()
        return UserResponse.model_validate(user)

    async def change_password(self, user_id: UUID, request: ChangePasswordRequest) -> None:
        row = await self.user_repo.get_password_hash(user_id)
        if not row:
            raise UserNotFoundException()

        if not row["password_hash"]:
            raise PasswordNotSetException()

        if not security.verify_password(request.current_password, row["password_hash"]):
            raise IncorrectPasswordException()

        await self.user_repo.update_password(user_id, security.hash_password(request.new_password))
        logger.info("password_changed", user_id=str(user_id))
