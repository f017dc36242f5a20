"""
Shared fixtures: settings, an in-memory database, and an HTTP client.
"""

import os

# Must be set before anything reads settings
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-access-secret-0123456789abcdef0123")
os.environ.setdefault("JWT_REFRESH_SECRET", "test-refresh-secret-0123456789abcdef012")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from auth.password import hash_password
from auth.tokens import TokenIssuer
from config.settings import Settings
from database.models import User
from database.session import Database
from main import create_app

DEFAULT_PASSWORD = "Test@1234"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def issuer(settings) -> TokenIssuer:
    return TokenIssuer.from_settings(settings)


@pytest_asyncio.fixture
async def database(settings):
    db = Database.from_settings(settings)
    await db.connect()
    await db.create_all()
    yield db
    await db.disconnect()


@pytest_asyncio.fixture
async def session(database):
    async with database.session() as s:
        yield s


@pytest_asyncio.fixture
async def client(settings, database):
    app = create_app(settings=settings, database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def make_user(database):
    """Factory: insert a user directly, returning ``(user, plain_password)``."""

    async def _make(
        email: str = "test@example.com",
        name: str = "TestUser",
        password: str = DEFAULT_PASSWORD,
        is_admin: bool = False,
    ):
        async with database.session() as s:
            user = User(
                name=name,
                email=email,
                password=hash_password(password),
                is_admin=is_admin,
            )
            s.add(user)
            await s.flush()
            await s.refresh(user)
        return user, password

    return _make
