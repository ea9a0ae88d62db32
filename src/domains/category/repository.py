from sqlalchemy import select

from core.database import Database
from domains.category.models import Category


class CategoryRepository:
    def __init__(self, db: Database):
        self.db = db

    async def get_categories(self) -> list[dict]:
        stmt = select(Category.id, Category.name).order_by(Category.name.asc())
        return await self.db.execute(stmt)
