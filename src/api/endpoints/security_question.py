from fastapi import APIRouter, Depends

from core.di import get_security_question_service
from domains.security_question.exceptions import SecurityQuestionNotFoundException
from domains.security_question.schemas import SecurityQuestionResponse
from domains.security_question.service import SecurityQuestionService
from util.docs import create_error_response

router = APIRouter()


@router.get(
    "",
    status_code=200,
    summary="Listar preguntas de seguridad",
    response_model=list[SecurityQuestionResponse],
)
async def get_security_questions(
    service: SecurityQuestionService = Depends(get_security_question_service),
):
    return await service.get_questions()


@router.get(
    "/random",
    status_code=200,
    summary="Pregunta de seguridad al azar",
    response_model=SecurityQuestionResponse,
    responses=create_error_response(SecurityQuestionNotFoundException),
)
async def get_random_security_question(
    service: SecurityQuestionService = Depends(get_security_question_service),
):
    return await service.get_random_question()
