from datetime import datetime
from uuid import UUID

from core.schemas import CamelModel


class CollectionAddRequest(CamelModel):
    recipe_id: UUID


class CollectionEntryResponse(CamelModel):
    user_id: UUID
    recipe_id: UUID
    created_at: datetime | None = None
