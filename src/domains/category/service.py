from domains.category.repository import CategoryRepository
from domains.category.schemas import CategoryResponse


class CategoryService:
    def __init__(self, category_repo: CategoryRepository):
        self.category_repo = category_repo

    async def get_categories(self) -> list[CategoryResponse]:
        rows = await self.category_repo.get_categories()
        return [CategoryResponse.model_validate(row) for row in rows]
