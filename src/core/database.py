import ssl
from typing import Any, Mapping

import structlog
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql import Executable

from core.config import settings
from core.exception.exceptions import DatabaseException

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    pass


def _connect_args() -> dict[str, Any]:
    if not settings.DATABASE_SSL:
        return {}

    context = ssl.create_default_context(cafile=settings.DATABASE_SSL_CA)
    return {"ssl": context}


def create_engine() -> AsyncEngine:
    return create_async_engine(
        settings.POSTGRES_DATABASE_URL,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_pre_ping=True,
        connect_args=_connect_args(),
    )


class Database:
    """Puerta de acceso única a la base de datos.

    Cada llamada a ``execute`` toma una conexión del pool, ejecuta una sola
    sentencia parametrizada y devuelve la conexión al pool, tanto si la
    sentencia termina bien como si falla.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def execute(
        self,
        statement: Executable | str,
        parameters: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        if isinstance(statement, str):
            statement = text(statement)

        try:
            async with self.engine.begin() as conn:
                if parameters is None:
                    result = await conn.execute(statement)
                else:
                    result = await conn.execute(statement, dict(parameters))

                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings().all()]

        except SQLAlchemyError as e:
            message = str(getattr(e, "orig", None) or e)
            logger.error("database_error", error=message, error_type=type(e).__name__)
            raise DatabaseException(detail=message) from e

        # el driver no envuelve los fallos de conexión (rechazo, timeout, DNS)
        except OSError as e:
            message = str(e) or type(e).__name__
            logger.error("database_unreachable", error=message, error_type=type(e).__name__)
            raise DatabaseException(detail=message) from e

    async def ping(self) -> None:
        await self.execute("SELECT 1")

    async def dispose(self) -> None:
        await self.engine.dispose()


engine = create_engine()
database = Database(engine)


def get_db() -> Database:
    return database
