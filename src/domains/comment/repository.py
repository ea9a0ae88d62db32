from uuid import UUID

from sqlalchemy import func, insert, literal, select

from core.database import Database
from domains.comment.models import Comment
from domains.user.models import User

ANONYMOUS_NAME = "Anónimo"
COMMENT_LIST_LIMIT = 50


class CommentRepository:
    def __init__(self, db: Database):
        self.db = db

    async def get_comments(self, recipe_id: UUID, limit: int = COMMENT_LIST_LIMIT) -> list[dict]:
        stmt = (
            select(
                Comment.id,
                Comment.text,
                Comment.created_at,
                Comment.user_id,
                func.coalesce(Comment.author_name, User.name, literal(ANONYMOUS_NAME)).label("author_name"),
                func.coalesce(Comment.author_avatar_url, User.avatar_url).label("author_avatar"),
            )
            .select_from(Comment)
            .outerjoin(User, User.id == Comment.user_id)
            .where(Comment.recipe_id == recipe_id)
            .order_by(Comment.created_at.desc())
            .limit(limit)
        )
        return await self.db.execute(stmt)

    async def save_comment(self, recipe_id: UUID, user_id: UUID | None, text: str) -> dict:
        stmt = (
            insert(Comment)
            .values(
                recipe_id=recipe_id,
                user_id=user_id,
                author_name=None if user_id else ANONYMOUS_NAME,
                author_avatar_url=None,
                text=text,
            )
            .returning(
                Comment.id,
                Comment.text,
                Comment.created_at,
                Comment.user_id,
                Comment.author_name,
                Comment.author_avatar_url.label("author_avatar"),
            )
        )
        rows = await self.db.execute(stmt)
        return rows[0]
