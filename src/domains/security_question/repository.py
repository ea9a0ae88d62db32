from sqlalchemy import select

from core.database import Database
from domains.security_question.models import SecurityQuestion


class SecurityQuestionRepository:
    def __init__(self, db: Database):
        self.db = db

    async def get_questions(self) -> list[dict]:
        stmt = select(SecurityQuestion.id, SecurityQuestion.question).order_by(SecurityQuestion.id)
        return await self.db.execute(stmt)
