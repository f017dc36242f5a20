"""
FastAPI dependencies (shared across routes).
"""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from database.session import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


async def db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the app's database handle for one request."""
    async with get_database(request).session() as session:
        yield session
