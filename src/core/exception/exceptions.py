# src/core/exception/exceptions.py
from pydantic import BaseModel, Field
from typing import Any


class BaseCustomException(Exception):
    def __init__(self, status_code: int, code: str, detail: str):
        self.status_code = status_code
        self.code = code
        self.detail = detail
        super().__init__(detail)


class DatabaseException(BaseCustomException):
    def __init__(self, detail: str = "Error de base de datos"):
        super().__init__(status_code=500, code="DB_ERROR", detail=detail)


class GlobalErrorResponse(BaseModel):
    error: str = Field(..., examples=["Mensaje de error"])
    details: dict[str, Any] | None = Field(None, description="Detalle por campo en errores de validación")
