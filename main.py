"""
Shopfront API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.middleware import register_middleware
from auth.routes import router as auth_router
from auth.tokens import TokenIssuer
from config.constants import API_PREFIX
from config.settings import Settings, get_settings
from database.session import Database
from products.routes import router as product_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("sqlalchemy.engine", "aiosqlite", "asyncio", "httpx", "httpcore"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    database = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.connect()
        if settings.auto_create_tables:
            await database.create_all()
        logger.info("Application ready to accept requests.")
        try:
            yield
        finally:
            await database.disconnect()

    app = FastAPI(
        title="Shopfront API",
        version="1.0.0",
        description="User signup / login and product listing.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.token_issuer = TokenIssuer.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_middleware(app)
    register_exception_handlers(app)

    @app.get("/api/test", include_in_schema=False)
    async def smoke_test() -> str:
        return "Test completed"

    app.include_router(auth_router, prefix=f"{API_PREFIX}/auth")
    app.include_router(product_router, prefix=f"{API_PREFIX}/products")

    return app


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
