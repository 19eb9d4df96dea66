"""
OnlineBk API — application entry point.

Run with ``python main.py`` or through uvicorn's app-factory mode::

    uvicorn --factory main:create_app --port 5000
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_error_handlers
from api.middleware import register_middleware
from api.routes import router as api_router
from auth.routes import router as auth_router
from auth.tokens import TokenIssuer
from config.settings import Settings, get_settings
from database.session import build_engine, build_session_factory, create_tables

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("sqlalchemy.engine", "aiosqlite", "asyncio", "httpx"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application around an explicit ``Settings`` object.

    Missing ``JWT_SECRET`` / ``DATABASE_URL`` fail here, before any request
    is served.
    """
    settings = settings or get_settings()
    configure_logging(settings.debug)
    engine = build_engine(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await create_tables(engine)
        logger.info("Application ready to accept requests.")
        yield
        await engine.dispose()

    app = FastAPI(
        title="OnlineBk API",
        version="1.0.0",
        description="User accounts and product catalog.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_issuer = TokenIssuer(
        settings.jwt_secret,
        expiry_seconds=settings.jwt_expiry_seconds,
        algorithm=settings.jwt_algorithm,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_error_handlers(app)

    # Routes
    app.include_router(auth_router, prefix="/api/auth")
    app.include_router(api_router)

    return app


if __name__ == "__main__":
    config = get_settings()
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level="debug" if config.debug else "info",
    )
