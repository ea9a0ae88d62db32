from core.schemas import CamelModel


class SecurityQuestionResponse(CamelModel):
    id: int
    question: str
