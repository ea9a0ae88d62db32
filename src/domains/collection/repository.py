from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert

from core.database import Database
from domains.collection.models import Favorite, MyRecipe


class CollectionRepository:
    """Tabla puente usuario-receta; sirve tanto para favoritos como para "mis recetas"."""

    def __init__(self, db: Database, model: type[Favorite] | type[MyRecipe]):
        self.db = db
        self.model = model

    def _columns(self):
        return (self.model.user_id, self.model.recipe_id, self.model.created_at)

    async def get_entries(self, user_id: UUID) -> list[dict]:
        stmt = (
            select(*self._columns())
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc())
        )
        return await self.db.execute(stmt)

    async def get_entry(self, user_id: UUID, recipe_id: UUID) -> dict | None:
        stmt = select(*self._columns()).where(
            self.model.user_id == user_id,
            self.model.recipe_id == recipe_id,
        )
        rows = await self.db.execute(stmt)
        return rows[0] if rows else None

    async def add_entry(self, user_id: UUID, recipe_id: UUID) -> dict | None:
        """Devuelve None si el par ya existía."""
        stmt = (
            insert(self.model)
            .values(user_id=user_id, recipe_id=recipe_id)
            .on_conflict_do_nothing()
            .returning(*self._columns())
        )
        rows = await self.db.execute(stmt)
        return rows[0] if rows else None

    async def delete_entry(self, user_id: UUID, recipe_id: UUID) -> None:
        stmt = delete(self.model).where(
            self.model.user_id == user_id,
            self.model.recipe_id == recipe_id,
        )
        await self.db.execute(stmt)
