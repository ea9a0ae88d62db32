from core.exception.exceptions import BaseCustomException


class RecipeNotFoundException(BaseCustomException):
    def __init__(self, detail: str = "Receta no encontrada"):
        super().__init__(status_code=404, detail=detail, code="RECIPE_NOT_FOUND")


class NothingToUpdateException(BaseCustomException):
    def __init__(self, detail: str = "No hay campos para actualizar"):
        super().__init__(status_code=400, detail=detail, code="NOTHING_TO_UPDATE")
