from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from core.schemas import CamelModel, HttpUrlStr


class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)
    avatar_url: HttpUrlStr | None = None


class LogInRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class RenameUserRequest(CamelModel):
    name: str = Field(..., min_length=1)


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6)


class UserResponse(CamelModel):
    id: UUID
    name: str
    email: str
    avatar_url: str | None = None
    created_at: datetime


class MessageResponse(BaseModel):
    message: str
