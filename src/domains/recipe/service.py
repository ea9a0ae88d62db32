from uuid import UUID

import structlog
from fastapi import UploadFile

from domains.media.service import MediaService
from domains.recipe.exceptions import NothingToUpdateException, RecipeNotFoundException
from domains.recipe.repository import RECIPE_UPDATE_COLUMNS, RecipeRepository
from domains.recipe.schemas import RecipeCreateRequest, RecipeResponse, RecipeUpdateRequest
from util.query import build_assignments

logger = structlog.get_logger(__name__)


class RecipeService:
    def __init__(self, recipe_repo: RecipeRepository, media_service: MediaService | None = None):
        self.recipe_repo = recipe_repo
        self.media_service = media_service

    async def get_recipes(self) -> list[RecipeResponse]:
        rows = await self.recipe_repo.get_recipes()
        return [RecipeResponse.model_validate(row) for row in rows]

    async def get_user_recipes(self, user_id: UUID) -> list[RecipeResponse]:
        rows = await self.recipe_repo.get_recipes_by_user(user_id)
        return [RecipeResponse.model_validate(row) for row in rows]

    async def get_recipe(self, recipe_id: UUID) -> RecipeResponse:
        row = await self.recipe_repo.get_recipe(recipe_id)

        if not row:
            raise RecipeNotFoundException()
        return RecipeResponse.model_validate(row)

    async def create_recipe(self, request: RecipeCreateRequest) -> RecipeResponse:
        recipe_id = await self.recipe_repo.save_recipe(request.model_dump())
        logger.info("recipe_created", recipe_id=str(recipe_id), user_id=str(request.user_id))

        return await self.get_recipe(recipe_id)

    async def create_recipe_with_image(
        self, request: RecipeCreateRequest, image: UploadFile | None
    ) -> RecipeResponse:
        # la imagen subida tiene prioridad sobre imageUrl
        if image is not None:
            uploaded = await self.media_service.upload_image(image)
            request = request.model_copy(update={"image_url": uploaded.url})

        return await self.create_recipe(request)

    async def update_recipe(self, recipe_id: UUID, request: RecipeUpdateRequest) -> RecipeResponse:
        assignments = build_assignments(request.changes(), RECIPE_UPDATE_COLUMNS)

        if not assignments:
            raise NothingToUpdateException()

        if not await self.recipe_repo.update_recipe(recipe_id, assignments):
            raise RecipeNotFoundException()

        return await self.get_recipe(recipe_id)

    async def delete_recipe(self, recipe_id: UUID) -> None:
        is_deleted = await self.recipe_repo.delete_recipe(recipe_id)

        if not is_deleted:
            raise RecipeNotFoundException()
        logger.info("recipe_deleted", recipe_id=str(recipe_id))
