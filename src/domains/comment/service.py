from uuid import UUID

from domains.comment.exceptions import AnonymousCommentNotAllowedException
from domains.comment.repository import CommentRepository
from domains.comment.schemas import CommentCreateRequest, CommentResponse
from domains.user.exceptions import UserNotFoundException
from domains.user.repository import UserRepository


class CommentService:
    def __init__(self, comment_repo: CommentRepository, user_repo: UserRepository, allow_anonymous: bool = True):
        self.comment_repo = comment_repo
        self.user_repo = user_repo
        self.allow_anonymous = allow_anonymous

    async def get_comments(self, recipe_id: UUID) -> list[CommentResponse]:
        rows = await self.comment_repo.get_comments(recipe_id)
        return [CommentResponse.model_validate(row) for row in rows]

    async def add_comment(self, recipe_id: UUID, request: CommentCreateRequest) -> CommentResponse:
        author = None

        if request.user_id is None:
            if not self.allow_anonymous:
                raise AnonymousCommentNotAllowedException()
        else:
            author = await self.user_repo.get_user_by_id(request.user_id)
            if not author:
                raise UserNotFoundException()

        row = await self.comment_repo.save_comment(recipe_id, request.user_id, request.text)

        comment = CommentResponse.model_validate(row)
        if author:
            comment.author_name = author["name"]
            comment.author_avatar = author["avatar_url"]
        return comment
