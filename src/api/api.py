# src/api/api.py
from fastapi import APIRouter

from api.endpoints import (
    auth,
    category,
    comment,
    favorite,
    health,
    media,
    my_recipe,
    rating,
    recipe,
    security_question,
    user,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(category.router, prefix="/categories", tags=["categories"])
api_router.include_router(security_question.router, prefix="/security-questions", tags=["security-questions"])
api_router.include_router(media.router, tags=["media"])
api_router.include_router(recipe.router, prefix="/recipes", tags=["recipes"])
api_router.include_router(comment.router, prefix="/recipes", tags=["comments"])
api_router.include_router(rating.router, tags=["ratings"])
api_router.include_router(user.router, prefix="/users", tags=["users"])
api_router.include_router(favorite.router, prefix="/users", tags=["favorites"])
api_router.include_router(my_recipe.router, prefix="/users", tags=["my-recipes"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
