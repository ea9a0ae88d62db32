from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert

from core.database import Database
from domains.rating.models import Rating


class RatingRepository:
    def __init__(self, db: Database):
        self.db = db

    async def get_summary(self, recipe_id: UUID) -> dict:
        stmt = select(
            func.round(func.avg(Rating.rating), 2).label("average"),
            func.count().label("count"),
        ).where(Rating.recipe_id == recipe_id)
        rows = await self.db.execute(stmt)
        return rows[0] if rows else {"average": None, "count": 0}

    async def get_rating(self, user_id: UUID, recipe_id: UUID) -> int | None:
        stmt = select(Rating.rating).where(Rating.user_id == user_id, Rating.recipe_id == recipe_id)
        rows = await self.db.execute(stmt)
        return rows[0]["rating"] if rows else None

    async def upsert_rating(self, user_id: UUID, recipe_id: UUID, rating: int) -> dict:
        stmt = insert(Rating).values(user_id=user_id, recipe_id=recipe_id, rating=rating)
        stmt = stmt.on_conflict_do_update(
            index_elements=[Rating.user_id, Rating.recipe_id],
            set_={"rating": stmt.excluded.rating},
        ).returning(Rating.user_id, Rating.recipe_id, Rating.rating)
        rows = await self.db.execute(stmt)
        return rows[0]

    async def delete_rating(self, user_id: UUID, recipe_id: UUID) -> None:
        stmt = delete(Rating).where(Rating.user_id == user_id, Rating.recipe_id == recipe_id)
        await self.db.execute(stmt)
