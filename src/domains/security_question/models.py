from sqlalchemy import Column, Integer, Text

from core.database import Base


class SecurityQuestion(Base):
    __tablename__ = "security_questions"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
