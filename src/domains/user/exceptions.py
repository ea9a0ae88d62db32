from core.exception.exceptions import BaseCustomException


class UserNotFoundException(BaseCustomException):
    def __init__(self, detail: str = "Usuario no encontrado"):
        super().__init__(status_code=404, detail=detail, code="USER_NOT_FOUND")


class DuplicateEmailException(BaseCustomException):
    def __init__(self, detail: str = "El email ya está registrado"):
        super().__init__(status_code=409, detail=detail, code="EMAIL_CONFLICT")


class InvalidCredentialsException(BaseCustomException):
    def __init__(self, detail: str = "Credenciales inválidas"):
        super().__init__(status_code=401, detail=detail, code="INVALID_CREDENTIALS")


class PasswordNotSetException(BaseCustomException):
    def __init__(self, detail: str = "Cuenta sin contraseña"):
        super().__init__(status_code=401, detail=detail, code="PASSWORD_NOT_SET")


class IncorrectPasswordException(BaseCustomException):
    def __init__(self, detail: str = "La contraseña actual no es correcta"):
        super().__init__(status_code=401, detail=detail, code="INCORRECT_PASSWORD")
