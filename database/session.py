"""
Async SQLAlchemy database handle.

One ``Database`` is built by the application factory and stored on
``app.state``; the FastAPI lifespan owns ``connect`` / ``disconnect``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from config.settings import Settings
from database.models import Base

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, url: str, **engine_kwargs: Any) -> None:
        self.url = url
        self._engine_kwargs = engine_kwargs
        self.engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        url = settings.effective_database_url
        if url.startswith("sqlite"):
            if ":memory:" in url or url.endswith("://"):
                # every pooled connection would otherwise get its own empty DB
                return cls(
                    url,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                )
            return cls(url)
        return cls(url, pool_size=10, max_overflow=20, pool_recycle=3600)

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self) -> None:
        if self.engine is not None:
            return
        self.engine = create_async_engine(self.url, echo=False, **self._engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connected (%s)", self.engine.url.render_as_string(hide_password=True))

    async def disconnect(self) -> None:
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database disconnected")

    async def create_all(self) -> None:
        """Create any missing tables (no migrations are managed here)."""
        if self.engine is None:
            raise RuntimeError("Database is not connected")
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session; commit on success, roll back on error."""
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
