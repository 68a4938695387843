"""Tests for /api/health: version info plus a round-trip to the report store."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from splice_reports.infrastructure.database import get_db_session
from splice_reports.main import app


class _UnreachableSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))


@pytest.mark.asyncio
async def test_health_reports_reachable_store(sqlite_app):
    transport = ASGITransport(app=sqlite_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "ok"
    assert body["version"]


@pytest.mark.asyncio
async def test_health_degrades_when_store_is_unreachable():
    async def unreachable():
        yield _UnreachableSession()

    app.dependency_overrides[get_db_session] = unreachable
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/health")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json()["status"] == "degraded"
    assert response.json()["database"] == "unavailable"
