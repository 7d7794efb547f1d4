"""Async SQLite key-value store for submitted configurations."""

from __future__ import annotations

import asyncio

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

from pc_builder.persistence.errors import RepositoryError
from pc_builder.persistence.interfaces import KeyValueStore
from pc_builder.utils import utc_now

from .migrations import apply_migrations
from .models import SavedConfigurationRecord


class SQLiteKeyValueStore(KeyValueStore):
    """Stores one blob per key in the ``saved_configurations`` table."""

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker[AsyncSession],
        database_url: str,
    ) -> None:
        self._engine = engine
        self._session_factory = session_factory
        self._database_url = database_url
        self._migration_lock = asyncio.Lock()
        self._migrated = False

    async def write(self, key: str, blob: str) -> None:
        try:
            await self._ensure_migrated()
            async with self._session_factory() as session, session.begin():
                await session.merge(
                    SavedConfigurationRecord(key=key, blob=blob, updated_at=utc_now())
                )
        except SQLAlchemyError as exc:
            msg = f"Failed to write {key!r} to {self._database_url}"
            raise RepositoryError(msg) from exc

    async def read(self, key: str) -> str | None:
        try:
            await self._ensure_migrated()
            async with self._session_factory() as session:
                record = await session.get(SavedConfigurationRecord, key)
        except SQLAlchemyError as exc:
            msg = f"Failed to read {key!r} from {self._database_url}"
            raise RepositoryError(msg) from exc
        if record is None:
            return None
        return record.blob

    async def _ensure_migrated(self) -> None:
        async with self._migration_lock:
            if self._migrated:
                return
            await apply_migrations(self._engine)
            self._migrated = True

    async def dispose(self) -> None:
        await self._engine.dispose()


def _is_memory_database(database_url: str) -> bool:
    return make_url(database_url).database in (None, "", ":memory:")


def create_sqlite_key_value_store(database_url: str) -> SQLiteKeyValueStore:
    if _is_memory_database(database_url):
        # One shared connection; a new one would open an empty database.
        engine = create_async_engine(database_url, poolclass=StaticPool)
    else:
        # Unpooled: every ``asyncio.run`` call opens connections on its own loop.
        engine = create_async_engine(database_url, poolclass=NullPool)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    return SQLiteKeyValueStore(engine, session_factory, database_url)


__all__ = ["SQLiteKeyValueStore", "create_sqlite_key_value_store"]
