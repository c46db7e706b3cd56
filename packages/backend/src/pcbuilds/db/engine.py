"""Async SQLAlchemy engine and session factory.

Learn: SQLAlchemy 2.0 async mode — create_async_engine for connection pooling,
AsyncSession for per-request database access, dependency injection via FastAPI.

The engine is built from Settings by create_app() and kept on app.state,
so a test app can point at a different database without touching globals.
"""

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pcbuilds.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the app's engine. echo=True in debug to see SQL queries."""
    kwargs = {"echo": settings.debug}
    # Pool sizing only applies to server databases (not SQLite)
    if not settings.database_url.startswith("sqlite"):
        kwargs.update(pool_size=5, max_overflow=15, pool_pre_ping=True)
    return create_async_engine(settings.database_url, **kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory — each request gets its own session."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db(request: Request) -> AsyncSession:
    """FastAPI dependency — yields a session per request, auto-closes."""
    async with request.app.state.session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
