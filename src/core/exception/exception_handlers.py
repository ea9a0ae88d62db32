import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exception.exceptions import BaseCustomException

logger = structlog.get_logger(__name__)

VALIDATION_ERROR_MESSAGE = "Datos inválidos"

# prefijos de loc que FastAPI agrega y que no forman parte del nombre del campo
_LOC_SOURCES = {"body", "path", "query", "form", "header", "cookie"}

# los parámetros de ruta/query llegan en snake_case; el body ya viene con su alias camelCase
_PARAM_SOURCES = {"path", "query", "header", "cookie"}


def flatten_errors(errors) -> dict:
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}

    for error in errors:
        loc = list(error.get("loc", ()))
        source = loc[0] if loc and loc[0] in _LOC_SOURCES else None
        if source:
            loc = loc[1:]

        if source in _PARAM_SOURCES and loc and isinstance(loc[0], str):
            loc[0] = to_camel(loc[0])

        message = error.get("msg", "Valor inválido")

        # JSON mal formado: el loc restante es la posición del error, no un campo
        if not loc or error.get("type") == "json_invalid" or all(isinstance(part, int) for part in loc):
            form_errors.append(message)
            continue

        field = ".".join(str(part) for part in loc)
        field_errors.setdefault(field, []).append(message)

    return {"formErrors": form_errors, "fieldErrors": field_errors}


async def custom_exception_handler(request: Request, exc: BaseCustomException):
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, code=exc.code, detail=exc.detail)

    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def system_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled_exception", path=request.url.path, error_type=type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Error interno del servidor"},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": VALIDATION_ERROR_MESSAGE, "details": flatten_errors(exc.errors())},
    )
