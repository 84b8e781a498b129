"""Health endpoint tests."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test basic health check endpoint."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_health_check_store(client: AsyncClient):
    """Test health check with a readable store."""
    response = await client.get("/api/health/store")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "store": "json"}


@pytest.mark.asyncio
async def test_health_check_store_unreadable(client: AsyncClient, data_file):
    """Test that a corrupt data file fails the store health check."""
    data_file.write_text("[[[")

    response = await client.get("/api/health/store")
    assert response.status_code == 503
    assert response.json()["status"] == "error"


@pytest.mark.asyncio
async def test_request_id_header(client: AsyncClient):
    """Test that the request id is echoed back or generated."""
    response = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"

    response = await client.get("/api/health")
    assert response.headers["X-Request-ID"]
