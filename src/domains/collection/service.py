from uuid import UUID

from domains.collection.repository import CollectionRepository
from domains.collection.schemas import CollectionAddRequest, CollectionEntryResponse


class CollectionService:
    def __init__(self, collection_repo: CollectionRepository):
        self.collection_repo = collection_repo

    async def get_entries(self, user_id: UUID) -> list[CollectionEntryResponse]:
        rows = await self.collection_repo.get_entries(user_id)
        return [CollectionEntryResponse.model_validate(row) for row in rows]

    async def add_entry(self, user_id: UUID, request: CollectionAddRequest) -> CollectionEntryResponse:
        row = await self.collection_repo.add_entry(user_id, request.recipe_id)

        # insertar dos veces el mismo par no es un error: se devuelve el existente
        if row is None:
            row = await self.collection_repo.get_entry(user_id, request.recipe_id)

        if row is None:
            return CollectionEntryResponse(user_id=user_id, recipe_id=request.recipe_id)
        return CollectionEntryResponse.model_validate(row)

    async def remove_entry(self, user_id: UUID, recipe_id: UUID) -> None:
        await self.collection_repo.delete_entry(user_id, recipe_id)
