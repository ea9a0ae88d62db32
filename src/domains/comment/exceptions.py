from core.exception.exceptions import BaseCustomException


class AnonymousCommentNotAllowedException(BaseCustomException):
    def __init__(self, detail: str = "Debes indicar un usuario para comentar"):
        super().__init__(status_code=400, detail=detail, code="USER_REQUIRED")
