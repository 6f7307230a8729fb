import pytest

from tests.fixtures.api import API


@pytest.mark.asyncio
async def test_me_returns_profile(client, owner):
    response = await client.get(f"{API}/auth/me", headers=owner["headers"])

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["email"] == "owner@acme.com"
    assert data["company"]["id"] == owner["company"]["id"]


@pytest.mark.asyncio
async def test_me_requires_token(client):
    response = await client.get(f"{API}/auth/me")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_logout(client, owner):
    response = await client.post(f"{API}/auth/logout", headers=owner["headers"])

    assert response.status_code == 200
    assert response.json()["status"] == "success"


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
