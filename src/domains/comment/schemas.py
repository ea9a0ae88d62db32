from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, Field

from core.schemas import CamelModel


class CommentCreateRequest(CamelModel):
    text: str = Field(..., min_length=1, validation_alias=AliasChoices("text", "content"))
    user_id: UUID | None = None


class CommentResponse(CamelModel):
    id: UUID
    text: str
    created_at: datetime
    user_id: UUID | None = None
    author_name: str | None = None
    author_avatar: str | None = None
