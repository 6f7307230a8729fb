import pytest

from tests.fixtures.api import API, OWNER_PASSWORD


@pytest.mark.asyncio
async def test_login_success(client, owner):
    response = await client.post(
        f"{API}/auth/login", json={"email": "owner@acme.com", "password": OWNER_PASSWORD}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["id"] == owner["user"]["id"]
    assert data["company"]["name"] == "Acme Corp"
    assert data["tokens"]["access_token"]
    assert data["tokens"]["refresh_token"]


@pytest.mark.asyncio
async def test_login_wrong_password(client, owner):
    response = await client.post(
        f"{API}/auth/login", json={"email": "owner@acme.com", "password": "Wr0ngP@ss"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unknown_email(client):
    response = await client.post(
        f"{API}/auth/login", json={"email": "ghost@acme.com", "password": OWNER_PASSWORD}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"
