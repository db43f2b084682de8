"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. Everything process-wide is built exactly once here from a
Settings object: the DB engine and session factory, the password hasher,
and the token codec holding the signing secret. They live on app.state
and reach handlers through dependencies; nothing deeper reads env vars.

Run with: uvicorn bloglist.main:create_app --factory
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bloglist import __version__
from bloglist.api import api_router
from bloglist.api.errors import register_error_handlers
from bloglist.auth.jwt import TokenCodec
from bloglist.auth.password import PasswordHasher
from bloglist.config import Settings, load_settings
from bloglist.db.engine import build_engine, build_session_factory
from bloglist.logging_config import configure_logging
from bloglist.middleware.access_log import AccessLogMiddleware
from bloglist.middleware.request_id import RequestIdMiddleware
from bloglist.middleware.security import SecurityHeadersMiddleware

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle.

    Learn: Anything before `yield` runs at startup, after `yield` runs at shutdown.
    """
    settings: Settings = app.state.settings
    logger.info(
        "bloglist.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
    )

    yield

    logger.info("bloglist.shutdown")
    await app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build and return the FastAPI application.

    Raises FatalConfigError if settings come from the environment and
    the signing secret is missing.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level, json=settings.log_json)

    app = FastAPI(
        title="Bloglist",
        description="Blog listing service with token auth and owner-only mutations",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.password_hash_rounds)
    app.state.token_codec = TokenCodec(settings)

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: CORS → RequestId → AccessLog → Security → handler

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app
