import random

from domains.security_question.exceptions import SecurityQuestionNotFoundException
from domains.security_question.repository import SecurityQuestionRepository
from domains.security_question.schemas import SecurityQuestionResponse


class SecurityQuestionService:
    def __init__(self, question_repo: SecurityQuestionRepository):
        self.question_repo = question_repo

    async def get_questions(self) -> list[SecurityQuestionResponse]:
        rows = await self.question_repo.get_questions()
        return [SecurityQuestionResponse.model_validate(row) for row in rows]

    async def get_random_question(self) -> SecurityQuestionResponse:
        questions = await self.get_questions()

        if not questions:
            raise SecurityQuestionNotFoundException()
        return random.choice(questions)
