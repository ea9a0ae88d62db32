import pytest
import pytest_asyncio
import uuid6
from unittest.mock import AsyncMock
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, insert
from sqlalchemy.dialects import postgresql
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool

from core.database import Base, Database, get_db
from main import app

# se importan los modelos para registrar todas las tablas en Base.metadata
from domains.user.models import User  # noqa: F401
from domains.category.models import Category  # noqa: F401
from domains.recipe.models import Recipe  # noqa: F401
from domains.collection.models import Favorite, MyRecipe  # noqa: F401
from domains.rating.models import Rating  # noqa: F401
from domains.comment.models import Comment  # noqa: F401
from domains.security_question.models import SecurityQuestion  # noqa: F401


@pytest.fixture
def pg_sql():
    """Texto SQL que genera una sentencia en PostgreSQL, en una sola línea."""

    def _compile(stmt) -> str:
        return " ".join(str(stmt.compile(dialect=postgresql.dialect())).split())

    return _compile


@pytest.fixture
def mock_db():
    return AsyncMock(spec=Database)


@pytest.fixture
def executed(mock_db):
    """Última sentencia enviada a la base de datos simulada."""
    return lambda: mock_db.execute.await_args.args[0]


# --- base de datos real (SQLite en archivo) para probar el gateway ---
@pytest_asyncio.fixture
async def sqlite_db(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'recetas.db'}",
        poolclass=AsyncAdaptedQueuePool,
        pool_size=2,
        max_overflow=0,
    )

    # SQLite solo respeta ON DELETE CASCADE con foreign_keys activado
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield Database(engine)

    await engine.dispose()


# --- cliente HTTP contra la app con la base de datos simulada ---
@pytest_asyncio.fixture
async def client(mock_db):
    app.dependency_overrides[get_db] = lambda: mock_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def stored_recipe(sqlite_db):
    """(user_id, recipe_id) de una receta guardada en la base SQLite."""
    user_id = uuid6.uuid7()
    recipe_id = uuid6.uuid7()

    await sqlite_db.execute(insert(User).values(id=user_id, name="Ana", email="ana@recetas.com"))
    await sqlite_db.execute(insert(Recipe).values(id=recipe_id, title="Paella", user_id=user_id))
    return user_id, recipe_id
