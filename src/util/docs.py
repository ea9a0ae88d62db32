# src/util/docs.py
from typing import Type
from core.exception.exceptions import BaseCustomException, GlobalErrorResponse


# Genera la especificación de `responses` de Swagger a partir de las clases de excepción
def create_error_response(*exception_classes: Type[BaseCustomException]):
    responses = {}

    for exc_class in exception_classes:
        exc = exc_class()

        status_code = exc.status_code

        if status_code not in responses:
            responses[status_code] = {
                "model": GlobalErrorResponse,
                "content": {"application/json": {"examples": {}}},
            }

        responses[status_code]["content"]["application/json"]["examples"][exc_class.__name__] = {
            "summary": exc.detail,
            "value": {"error": exc.detail},
        }

    return responses

