from uuid import UUID

from fastapi import APIRouter, Depends

from core.di import get_comment_service
from domains.comment.exceptions import AnonymousCommentNotAllowedException
from domains.comment.schemas import CommentCreateRequest, CommentResponse
from domains.comment.service import CommentService
from domains.user.exceptions import UserNotFoundException
from util.docs import create_error_response

router = APIRouter()


@router.get(
    "/{recipe_id}/comments",
    status_code=200,
    summary="Comentarios de una receta (50 más recientes)",
    response_model=list[CommentResponse],
)
async def get_comments(recipe_id: UUID, service: CommentService = Depends(get_comment_service)):
    return await service.get_comments(recipe_id)


@router.post(
    "/{recipe_id}/comments",
    status_code=201,
    summary="Comentar una receta",
    response_model=CommentResponse,
    responses=create_error_response(AnonymousCommentNotAllowedException, UserNotFoundException),
)
async def add_comment(
    recipe_id: UUID,
    request: CommentCreateRequest,
    service: CommentService = Depends(get_comment_service),
):
    """
    Sin `userId` el comentario queda como "Anónimo" (si la configuración lo permite).
    """
    return await service.add_comment(recipe_id, request)
