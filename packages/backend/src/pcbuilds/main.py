"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. Settings, the DB engine and the session factory are built
here once and kept on app.state; dependencies read them from there.
Lifespan handles startup (table bootstrap) and shutdown (engine dispose).
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pcbuilds import __version__
from pcbuilds.api import api_router
from pcbuilds.config import Settings, get_settings
from pcbuilds.db.engine import build_engine, build_session_factory
from pcbuilds.db.models import Base
from pcbuilds.errors import PCBuildsError, RequestValidationFailed

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle.

    Learn: Anything before `yield` runs at startup, after `yield` runs
    at shutdown. Production deployments run Alembic migrations and set
    PCBUILDS_CREATE_TABLES_ON_STARTUP=false.
    """
    settings: Settings = app.state.settings
    logger.info(
        "pcbuilds.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
    )

    if settings.create_tables_on_startup:
        async with app.state.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("pcbuilds.tables_ready")

    yield

    logger.info("pcbuilds.shutdown")
    await app.state.engine.dispose()


async def handle_app_error(request: Request, exc: PCBuildsError) -> JSONResponse:
    """Render any PCBuildsError as {"message", "error"?}."""
    if exc.status_code >= 500:
        logger.error(
            "request.failed",
            status=exc.status_code,
            message=exc.message,
            error=exc.error,
        )
    else:
        logger.info("request.rejected", status=exc.status_code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies (bad JSON, wrong types) are plain 400s."""
    errors = exc.errors()
    detail = errors[0].get("msg") if errors else None
    return await handle_app_error(request, RequestValidationFailed(error=detail))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build and return the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="PC Builds API",
        description="Browse and manage PC builds, with cookie-based auth",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: RequestId → Security → CORS → handler

    from pcbuilds.middleware.request_id import RequestIdMiddleware
    from pcbuilds.middleware.security import SecurityHeadersMiddleware

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIdMiddleware)

    app.add_exception_handler(PCBuildsError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: pcbuilds.main:app)
app = create_app()
