from uuid import uuid4

from jose import jwt

from config import ApplicationConfig
from src.api.utils.jwt import (
    generate_token_pair,
    verify_access_token,
    verify_refresh_token,
)
from src.domain.entities import User, UserRole


def _user():
    return User(
        id=uuid4(),
        email="alice@example.com",
        first_name="Alice",
        last_name="Smith",
        role=UserRole.employee,
        company_id=uuid4(),
    )


def test_access_token_claims():
    user = _user()
    pair = generate_token_pair(user)

    claims = verify_access_token(pair.access_token)

    assert claims["sub"] == str(user.id)
    assert claims["email"] == "alice@example.com"
    assert claims["role"] == "employee"
    assert claims["company"] == str(user.company_id)
    assert claims["iss"] == ApplicationConfig.JWT_ISSUER
    assert claims["aud"] == ApplicationConfig.JWT_AUDIENCE
    assert claims["exp"] - claims["iat"] == 15 * 60


def test_refresh_token_claims():
    user = _user()
    pair = generate_token_pair(user)

    claims = verify_refresh_token(pair.refresh_token)

    assert claims["sub"] == str(user.id)
    assert claims["type"] == "refresh"
    assert "email" not in claims
    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60


def test_tokens_are_not_interchangeable():
    pair = generate_token_pair(_user())

    assert verify_access_token(pair.refresh_token) is None
    assert verify_refresh_token(pair.access_token) is None


def test_wrong_audience_rejected():
    token = jwt.encode(
        {"sub": "x", "iss": ApplicationConfig.JWT_ISSUER, "aud": "someone-else"},
        ApplicationConfig.JWT_ACCESS_SECRET,
        algorithm="HS256",
    )

    assert verify_access_token(token) is None
