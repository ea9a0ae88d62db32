from fastapi import Depends

from core.config import settings
from core.database import Database, get_db
from domains.category.repository import CategoryRepository
from domains.category.service import CategoryService
from domains.collection.models import Favorite, MyRecipe
from domains.collection.repository import CollectionRepository
from domains.collection.service import CollectionService
from domains.comment.repository import CommentRepository
from domains.comment.service import CommentService
from domains.media.client import CloudinaryClient
from domains.media.service import MediaService
from domains.rating.repository import RatingRepository
from domains.rating.service import RatingService
from domains.recipe.repository import RecipeRepository
from domains.recipe.service import RecipeService
from domains.security_question.repository import SecurityQuestionRepository
from domains.security_question.service import SecurityQuestionService
from domains.user.repository import UserRepository
from domains.user.service import UserService


# --- usuarios ---
def get_user_repo(db: Database = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_user_service(user_repo: UserRepository = Depends(get_user_repo)) -> UserService:
    return UserService(user_repo)


# --- imágenes ---
def get_cloudinary_client() -> CloudinaryClient:
    return CloudinaryClient()


def get_media_service(client: CloudinaryClient = Depends(get_cloudinary_client)) -> MediaService:
    return MediaService(client)


# --- recetas ---
def get_recipe_repo(db: Database = Depends(get_db)) -> RecipeRepository:
    return RecipeRepository(db)


def get_recipe_service(
    recipe_repo: RecipeRepository = Depends(get_recipe_repo),
    media_service: MediaService = Depends(get_media_service),
) -> RecipeService:
    return RecipeService(recipe_repo=recipe_repo, media_service=media_service)


def get_category_service(db: Database = Depends(get_db)) -> CategoryService:
    return CategoryService(CategoryRepository(db))


# --- favoritos / mis recetas ---
def get_favorite_service(db: Database = Depends(get_db)) -> CollectionService:
    return CollectionService(CollectionRepository(db, Favorite))


def get_my_recipe_service(db: Database = Depends(get_db)) -> CollectionService:
    return CollectionService(CollectionRepository(db, MyRecipe))


# --- valoraciones / comentarios ---
def get_rating_service(db: Database = Depends(get_db)) -> RatingService:
    return RatingService(RatingRepository(db))


def get_comment_service(
    db: Database = Depends(get_db),
    user_repo: UserRepository = Depends(get_user_repo),
) -> CommentService:
    return CommentService(
        comment_repo=CommentRepository(db),
        user_repo=user_repo,
        allow_anonymous=settings.ALLOW_ANONYMOUS_COMMENTS,
    )


def get_security_question_service(db: Database = Depends(get_db)) -> SecurityQuestionService:
    return SecurityQuestionService(SecurityQuestionRepository(db))
