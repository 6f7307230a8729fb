import pytest

from src.api.utils.jwt import verify_access_token
from src.app.services.notification_service import NotificationKind
from tests.fixtures.api import API, OWNER_PASSWORD


def _signup_body(**overrides):
    body = {
        "email": "founder@acme.com",
        "password": OWNER_PASSWORD,
        "first_name": "Fay",
        "last_name": "Founder",
        "company_name": "Acme Corp",
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_signup_success(client, notifier):
    """Test owner signup returns user, company and credential pair"""
    response = await client.post(f"{API}/auth/signup", json=_signup_body())

    assert response.status_code == 201
    data = response.json()
    assert data["user"]["email"] == "founder@acme.com"
    assert data["user"]["role"] == "owner"
    assert data["user"]["email_verified"] is False
    assert data["company"]["name"] == "Acme Corp"
    assert "password_hash" not in data["user"]

    claims = verify_access_token(data["tokens"]["access_token"])
    assert claims["company"] == data["company"]["id"]
    assert notifier.count(NotificationKind.email_verification) == 1


@pytest.mark.asyncio
async def test_signup_duplicate_email(client):
    """Test signing up twice with the same email returns 409"""
    await client.post(f"{API}/auth/signup", json=_signup_body())

    response = await client.post(
        f"{API}/auth/signup", json=_signup_body(email="FOUNDER@acme.com")
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "USER_ALREADY_EXISTS"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "password", ["Sh0rt!", "alllowercase1!", "NoDigits!!", "NoSpecial123"]
)
async def test_signup_weak_password(client, password):
    response = await client.post(
        f"{API}/auth/signup", json=_signup_body(password=password)
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "password"


@pytest.mark.asyncio
async def test_signup_invalid_email(client):
    response = await client.post(f"{API}/auth/signup", json=_signup_body(email="not-an-email"))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
