from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel

from config import ApplicationConfig
from src.domain.entities import User

ACCESS_TOKEN_TTL = timedelta(minutes=15)
REFRESH_TOKEN_TTL = timedelta(days=7)
ALGORITHM = "HS256"


class TokenPair(BaseModel):
    """Access and refresh credentials returned to the client"""

    access_token: str
    refresh_token: str


def generate_access_token(user: User) -> str:
    """
    Generate JWT access token

    Args:
        user: Authenticated user

    Returns:
        JWT token string (HS256, 15-minute expiry) carrying subject, email,
        role and company claims
    """
    now = datetime.now(UTC)
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "role": user.role.value,
        "company": str(user.company_id),
        "iss": ApplicationConfig.JWT_ISSUER,
        "aud": ApplicationConfig.JWT_AUDIENCE,
        "exp": now + ACCESS_TOKEN_TTL,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_ACCESS_SECRET, algorithm=ALGORITHM)


def generate_refresh_token(user: User) -> str:
    """
    Generate JWT refresh token

    Signed with a key distinct from the access token and carrying only the
    subject, so it cannot be replayed as an access token.
    """
    now = datetime.now(UTC)
    payload = {
        "sub": str(user.id),
        "type": "refresh",
        "iss": ApplicationConfig.JWT_ISSUER,
        "aud": ApplicationConfig.JWT_AUDIENCE,
        "exp": now + REFRESH_TOKEN_TTL,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_REFRESH_SECRET, algorithm=ALGORITHM)


def generate_token_pair(user: User) -> TokenPair:
    return TokenPair(
        access_token=generate_access_token(user),
        refresh_token=generate_refresh_token(user),
    )


def _decode(token: str, secret: str) -> Optional[dict]:
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            audience=ApplicationConfig.JWT_AUDIENCE,
            issuer=ApplicationConfig.JWT_ISSUER,
        )
    except JWTError:
        return None


def verify_access_token(token: str) -> Optional[dict]:
    """
    Verify and decode an access token

    Returns:
        Decoded payload dict or None if invalid
    """
    payload = _decode(token, ApplicationConfig.JWT_ACCESS_SECRET)
    if payload is None or payload.get("type") == "refresh":
        return None
    return payload


def verify_refresh_token(token: str) -> Optional[dict]:
    """
    Verify and decode a refresh token

    Returns:
        Decoded payload dict or None if invalid or not a refresh token
    """
    payload = _decode(token, ApplicationConfig.JWT_REFRESH_SECRET)
    if payload is None or payload.get("type") != "refresh":
        return None
    return payload
