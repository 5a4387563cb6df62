import pytest
from httpx import AsyncClient
from conftest import FEEDBACK_PAYLOAD


@pytest.mark.asyncio
async def test_admin_endpoints_require_admin(client: AsyncClient, user_headers):
    for path in ("/api/admin/users", "/api/admin/stats"):
        response = await client.get(path, headers=user_headers)
        assert response.status_code == 403


@pytest.mark.asyncio
async def test_admin_endpoints_unauthorized(client: AsyncClient):
    for path in ("/api/admin/users", "/api/admin/stats"):
        response = await client.get(path)
        assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_users_without_secrets(client: AsyncClient, user_headers, admin_headers):
    response = await client.get("/api/admin/users", headers=admin_headers)
    assert response.status_code == 200

    data = response.json()
    assert data["count"] == 2
    assert {a["role"] for a in data["accounts"]} == {"user", "admin"}
    for account in data["accounts"]:
        assert set(account) == {"id", "name", "email", "role", "createdAt"}
    assert "secret1" not in response.text
    assert "$2" not in response.text


@pytest.mark.asyncio
async def test_stats_empty(client: AsyncClient, admin_headers):
    response = await client.get("/api/admin/stats", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"totalUsers": 0, "totalFeedbacks": 0, "averageRating": 0.0}


@pytest.mark.asyncio
async def test_stats_counts_and_average(client: AsyncClient, user_headers, other_user_headers, admin_headers):
    for headers, rating in ((user_headers, 9), (user_headers, 8), (other_user_headers, 6)):
        response = await client.post(
            "/api/feedback",
            json={**FEEDBACK_PAYLOAD, "rateOurFriendship": rating},
            headers=headers,
        )
        assert response.status_code == 201

    response = await client.get("/api/admin/stats", headers=admin_headers)
    data = response.json()
    assert data["totalUsers"] == 2
    assert data["totalFeedbacks"] == 3
    assert data["averageRating"] == 7.7
