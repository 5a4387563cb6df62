import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test the health check endpoint."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_root_welcome(client: AsyncClient):
    response = await client.get("/")
    data = response.json()
    assert response.status_code == 200
    assert "message" in data
    assert isinstance(data["status"], str)
