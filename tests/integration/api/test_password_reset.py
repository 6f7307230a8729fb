import pytest

from src.app.services.notification_service import NotificationKind
from tests.fixtures.api import API
from tests.fixtures.notifications import token_from_link

NEW_PASSWORD = "Br4ndNew!pw"


@pytest.mark.asyncio
async def test_forgot_password_same_answer_for_unknown_email(client, owner, notifier):
    known = await client.post(f"{API}/auth/forgot-password", json={"email": "owner@acme.com"})
    unknown = await client.post(f"{API}/auth/forgot-password", json={"email": "ghost@acme.com"})

    assert known.status_code == unknown.status_code == 200
    assert known.json() == unknown.json()
    assert notifier.count(NotificationKind.password_reset) == 1


@pytest.mark.asyncio
async def test_reset_password_flow(client, owner, notifier):
    """Test reset link sets a new password and cannot be reused"""
    await client.post(f"{API}/auth/forgot-password", json={"email": "owner@acme.com"})
    token = token_from_link(notifier.last(NotificationKind.password_reset)["reset_link"])
    body = {"token": token, "password": NEW_PASSWORD, "confirm_password": NEW_PASSWORD}

    response = await client.post(f"{API}/auth/reset-password", json=body)
    assert response.status_code == 200

    reused = await client.post(f"{API}/auth/reset-password", json=body)
    assert reused.status_code == 400
    assert reused.json()["error"]["code"] == "INVALID_OR_EXPIRED_TOKEN"

    login = await client.post(
        f"{API}/auth/login", json={"email": "owner@acme.com", "password": NEW_PASSWORD}
    )
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_reset_password_mismatch(client):
    response = await client.post(
        f"{API}/auth/reset-password",
        json={"token": "whatever", "password": NEW_PASSWORD, "confirm_password": "Other!pw1"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
