from core.exception.exceptions import BaseCustomException


class SecurityQuestionNotFoundException(BaseCustomException):
    def __init__(self, detail: str = "No hay preguntas de seguridad registradas"):
        super().__init__(status_code=404, detail=detail, code="SECURITY_QUESTION_NOT_FOUND")
