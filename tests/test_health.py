"""
Health endpoint tests - TDD: fast feedback on API availability.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    """GET /v1/health returns 200 and status ok."""
    response = await client.get("/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


@pytest.mark.asyncio
async def test_ready(client: AsyncClient):
    """GET /v1/health/ready pings the database and Redis."""
    response = await client.get("/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "database": "ok", "redis": "ok"}


@pytest.mark.asyncio
async def test_ready_reports_redis_down(client: AsyncClient, fake_redis):
    async def down():
        raise ConnectionError("redis down")

    fake_redis.ping = down
    response = await client.get("/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["redis"] == "unavailable"


@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient):
    response = await client.get("/metrics/")
    assert response.status_code == 200
