# workshop_sdk/auth_store.py
"""
Persisted debug identity (user id + roles), read once at startup.

Roles are stored as a JSON array string. A value that does not decode to a
list of strings is treated as "no roles".
"""
import json
import logging
from typing import NamedTuple

from sqlalchemy import String, delete, select
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

logger = logging.getLogger(__name__)

USER_ID_KEY = "userId"
USER_ROLES_KEY = "userRoles"


class Base(DeclarativeBase):
    pass


class AuthEntry(Base):
    __tablename__ = "auth_state"
    key: Mapped[str] = mapped_column(String(50), primary_key=True)
    value: Mapped[str] = mapped_column(String(2000))


class AuthState(NamedTuple):
    user_id: str
    user_roles: list[str]


def _decode_roles(raw: str | None) -> list[str]:
    if not raw:
        return []
    try:
        roles = json.loads(raw)
    except ValueError:
        logger.warning("Stored user roles are not valid JSON, ignoring them")
        return []
    if not isinstance(roles, list) or not all(isinstance(r, str) for r in roles):
        logger.warning("Stored user roles are not a list of strings, ignoring them")
        return []
    return roles


class AuthStore:
    def __init__(self, db_url: str | None = None, engine: AsyncEngine | None = None):
        if engine is None:
            if db_url is None:
                raise ValueError("AuthStore needs either db_url or engine")
            engine = create_async_engine(db_url, echo=False)
        self.engine = engine
        self.async_session = async_sessionmaker(engine, expire_on_commit=False)

    async def init_store(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def _get(self, key: str) -> str | None:
        async with self.async_session() as session:
            result = await session.execute(select(AuthEntry).where(AuthEntry.key == key))
            entry = result.scalar_one_or_none()
            return entry.value if entry else None

    async def load_auth(self) -> AuthState:
        user_id = await self._get(USER_ID_KEY) or ""
        roles = _decode_roles(await self._get(USER_ROLES_KEY))
        return AuthState(user_id=user_id, user_roles=roles)

    async def set_auth(self, user_id: str, user_roles: list[str]) -> None:
        values = {USER_ID_KEY: user_id, USER_ROLES_KEY: json.dumps(list(user_roles))}
        async with self.async_session() as session:
            for key, value in values.items():
                result = await session.execute(
                    select(AuthEntry).where(AuthEntry.key == key)
                )
                entry = result.scalar_one_or_none()
                if entry:
                    entry.value = value
                else:
                    session.add(AuthEntry(key=key, value=value))
            await session.commit()
        logger.info(f"Stored debug identity for user {user_id}")

    async def logout(self) -> None:
        async with self.async_session() as session:
            await session.execute(
                delete(AuthEntry).where(AuthEntry.key.in_([USER_ID_KEY, USER_ROLES_KEY]))
            )
            await session.commit()

    async def dispose(self) -> None:
        await self.engine.dispose()
