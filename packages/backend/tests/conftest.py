"""Test fixtures — a fresh app and database per test.

Learn: Testing pattern for async SQLAlchemy + FastAPI:

1. Each test gets its own Settings pointing at a throwaway SQLite file
   (sqlite+aiosqlite) under pytest's tmp_path, so no Postgres is needed.
2. create_app(settings) builds the engine; the fixture creates tables
   directly because httpx's ASGITransport doesn't run the lifespan.
3. The client talks HTTPS: session cookies are Secure, and the cookie
   jar only sends Secure cookies back over https.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from pcbuilds.auth.jwt import TokenIssuer
from pcbuilds.config import Settings
from pcbuilds.db.models import Base
from pcbuilds.main import create_app


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        access_token_secret="test-access-secret",
        refresh_token_secret="test-refresh-secret",
        bcrypt_rounds=4,  # bcrypt's minimum
        create_tables_on_startup=False,
    )


@pytest.fixture()
def issuer(settings) -> TokenIssuer:
    return TokenIssuer(settings)


@pytest_asyncio.fixture()
async def app(settings):
    app = create_app(settings)
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield app
    finally:
        await app.state.engine.dispose()


@pytest_asyncio.fixture()
async def client(app):
    """HTTPS client with a cookie jar, like a browser on the frontend."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="https://test") as ac:
        yield ac


@pytest_asyncio.fixture()
async def db_session(app):
    """Direct DB session for arranging state the API can't create."""
    async with app.state.session_factory() as session:
        yield session
