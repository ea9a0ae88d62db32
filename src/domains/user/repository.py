from uuid import UUID

from sqlalchemy import exists, func, insert, select, update

from core.database import Database
from domains.user.models import User

# columnas públicas; password_hash nunca sale de aquí salvo en get_user_credentials
USER_COLUMNS = (User.id, User.name, User.email, User.avatar_url, User.created_at)


class UserRepository:
    def __init__(self, db: Database):
        self.db = db

    async def _get_one(self, stmt) -> dict | None:
        rows = await self.db.execute(stmt)
        return rows[0] if rows else None

    async def get_user_by_id(self, user_id: UUID) -> dict | None:
        return await self._get_one(select(*USER_COLUMNS).where(User.id == user_id))

    async def email_exists(self, email: str) -> bool:
        stmt = select(exists().where(func.lower(User.email) == func.lower(email)).label("exists"))
        row = await self._get_one(stmt)
        return bool(row and row["exists"])

    async def get_user_credentials(self, email: str) -> dict | None:
        stmt = (
            select(*USER_COLUMNS, User.password_hash)
            .where(func.lower(User.email) == func.lower(email))
            .limit(1)
        )
        return await self._get_one(stmt)

    async def get_password_hash(self, user_id: UUID) -> dict | None:
        return await self._get_one(select(User.id, User.password_hash).where(User.id == user_id))

    async def save_user(self, name: str, email: str, password_hash: str, avatar_url: str | None) -> dict:
        stmt = (
            insert(User)
            .values(name=name, email=email, password_hash=password_hash, avatar_url=avatar_url)
            .returning(*USER_COLUMNS)
        )
        return await self._get_one(stmt)

    async def update_name(self, user_id: UUID, name: str) -> dict | None:
        stmt = update(User).where(User.id == user_id).values(name=name).returning(*USER_COLUMNS)
        return await self._get_one(stmt)

    async def update_password(self, user_id: UUID, password_hash: str) -> bool:
        stmt = update(User).where(User.id == user_id).values(password_hash=password_hash).returning(User.id)
        return await self._get_one(stmt) is not None
