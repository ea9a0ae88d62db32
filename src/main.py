from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.api import api_router
from core.config import settings
from core.database import database
from core.exception.exception_handlers import (
    custom_exception_handler,
    http_exception_handler,
    system_exception_handler,
    validation_exception_handler,
)
from core.exception.exceptions import BaseCustomException
from core.logging import configure_logging
from core.middleware import RequestLoggingMiddleware

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("startup", port=settings.PORT)
    yield
    await database.dispose()
    logger.info("shutdown")


app = FastAPI(title="Recetas API", lifespan=lifespan)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(BaseCustomException, custom_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, system_exception_handler)

app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
