from typing import Any
from uuid import UUID

from sqlalchemy import delete, insert, select, update

from core.database import Database
from domains.category.models import Category
from domains.recipe.models import Recipe
from domains.user.models import User
from util.query import Assignments

# campo de la API -> columna; el orden define el orden del SET
RECIPE_UPDATE_COLUMNS = {
    "title": "title",
    "description": "description",
    "category_id": "category_id",
    "image_url": "image_url",
    "ingredients": "ingredients",
    "prep_time": "prep_time",
    "cook_time": "cook_time",
    "servings": "servings",
    "difficulty": "difficulty",
}


def _recipe_select():
    return (
        select(
            Recipe.id,
            Recipe.title,
            Recipe.description,
            Recipe.category_id,
            Category.name.label("category"),
            Recipe.image_url,
            Recipe.ingredients,
            Recipe.prep_time,
            Recipe.cook_time,
            Recipe.servings,
            Recipe.difficulty,
            Recipe.user_id,
            User.name.label("author"),
            User.avatar_url.label("author_avatar"),
            Recipe.created_at,
        )
        .select_from(Recipe)
        .outerjoin(Category, Category.id == Recipe.category_id)
        .outerjoin(User, User.id == Recipe.user_id)
    )


class RecipeRepository:
    def __init__(self, db: Database):
        self.db = db

    async def get_recipes(self) -> list[dict]:
        stmt = _recipe_select().order_by(Recipe.created_at.desc())
        return await self.db.execute(stmt)

    async def get_recipes_by_user(self, user_id: UUID) -> list[dict]:
        stmt = _recipe_select().where(Recipe.user_id == user_id).order_by(Recipe.created_at.desc())
        return await self.db.execute(stmt)

    async def get_recipe(self, recipe_id: UUID) -> dict | None:
        rows = await self.db.execute(_recipe_select().where(Recipe.id == recipe_id))
        return rows[0] if rows else None

    async def save_recipe(self, values: dict[str, Any]) -> UUID:
        stmt = insert(Recipe).values(**values).returning(Recipe.id)
        rows = await self.db.execute(stmt)
        return rows[0]["id"]

    async def update_recipe(self, recipe_id: UUID, assignments: Assignments) -> bool:
        stmt = (
            update(Recipe)
            .where(Recipe.id == recipe_id)
            .values(assignments.as_dict())
            .returning(Recipe.id)
        )
        rows = await self.db.execute(stmt)
        return bool(rows)

    async def delete_recipe(self, recipe_id: UUID) -> bool:
        stmt = delete(Recipe).where(Recipe.id == recipe_id).returning(Recipe.id)
        rows = await self.db.execute(stmt)
        return bool(rows)
