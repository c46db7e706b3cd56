"""Health and root endpoint tests."""

import pytest


@pytest.mark.asyncio
async def test_health_returns_ok(client):
    """Health endpoint should return server status, version, and DB check."""
    resp = await client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["server"] == "ok"
    assert data["database"] == "ok"
    assert data["status"] == "healthy"
    assert "version" in data


@pytest.mark.asyncio
async def test_root_greeting(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json() == "PCs Database! Browse your favorite build"
