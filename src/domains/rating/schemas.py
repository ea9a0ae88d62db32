from uuid import UUID

from pydantic import Field

from core.schemas import CamelModel


class RatingRequest(CamelModel):
    rating: int = Field(..., ge=1, le=5)


class RatingResponse(CamelModel):
    user_id: UUID
    recipe_id: UUID
    rating: int


class UserRatingResponse(CamelModel):
    rating: int | None = None


class RatingSummaryResponse(CamelModel):
    average: float = 0
    count: int = 0
