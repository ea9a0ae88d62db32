from uuid import UUID

from domains.rating.repository import RatingRepository
from domains.rating.schemas import (
    RatingRequest,
    RatingResponse,
    RatingSummaryResponse,
    UserRatingResponse,
)


class RatingService:
    def __init__(self, rating_repo: RatingRepository):
        self.rating_repo = rating_repo

    async def get_summary(self, recipe_id: UUID) -> RatingSummaryResponse:
        row = await self.rating_repo.get_summary(recipe_id)

        average = row.get("average")
        return RatingSummaryResponse(
            average=round(float(average), 2) if average is not None else 0,
            count=int(row.get("count") or 0),
        )

    async def get_user_rating(self, user_id: UUID, recipe_id: UUID) -> UserRatingResponse:
        rating = await self.rating_repo.get_rating(user_id, recipe_id)
        return UserRatingResponse(rating=rating)

    async def rate_recipe(self, user_id: UUID, recipe_id: UUID, request: RatingRequest) -> RatingResponse:
        row = await self.rating_repo.upsert_rating(user_id, recipe_id, request.rating)
        return RatingResponse.model_validate(row)

    async def delete_rating(self, user_id: UUID, recipe_id: UUID) -> None:
        await self.rating_repo.delete_rating(user_id, recipe_id)
