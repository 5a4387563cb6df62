"""End-to-end walk through registration, submission, review and deletion."""
import pytest
from httpx import AsyncClient
from conftest import FEEDBACK_PAYLOAD, bearer, register


@pytest.mark.asyncio
async def test_feedback_lifecycle(client: AsyncClient, admin_headers):
    body = await register(client, "A", "a@x.com", "secret1")
    owner = bearer(body["token"])

    response = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "wrong-pass"})
    assert response.status_code == 401

    response = await client.get("/api/feedback/my", headers=owner)
    assert response.json() == {"count": 0, "records": []}

    response = await client.post("/api/feedback", json=FEEDBACK_PAYLOAD, headers=owner)
    assert response.status_code == 201
    record = response.json()["record"]

    response = await client.get("/api/feedback/my", headers=owner)
    assert response.json() == {"count": 1, "records": [record]}

    response = await client.get("/api/feedback/all", headers=admin_headers)
    assert record["id"] in [r["id"] for r in response.json()["records"]]

    other = bearer((await register(client, "B", "b@x.com", "secret2"))["token"])
    response = await client.delete(f"/api/feedback/{record['id']}", headers=other)
    assert response.status_code == 403

    response = await client.delete(f"/api/feedback/{record['id']}", headers=owner)
    assert response.status_code == 200

    response = await client.get(f"/api/feedback/{record['id']}", headers=owner)
    assert response.status_code == 404
