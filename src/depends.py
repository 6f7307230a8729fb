from functools import lru_cache
from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.notification_service import (
    LoggingNotificationService,
    SmtpNotificationService,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_access_token
from src.app.services.notification_service import INotificationService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache(maxsize=1)
def get_notification_service() -> INotificationService:
    """Notification dispatcher selected by EMAIL_BACKEND"""
    if ApplicationConfig.EMAIL_BACKEND == "smtp":
        return SmtpNotificationService(
            host=ApplicationConfig.SMTP_HOST,
            port=ApplicationConfig.SMTP_PORT,
            username=ApplicationConfig.SMTP_USER,
            password=ApplicationConfig.SMTP_PASSWORD,
            sender=ApplicationConfig.EMAIL_FROM,
            use_tls=ApplicationConfig.SMTP_USE_TLS,
            timeout=ApplicationConfig.SMTP_TIMEOUT,
        )
    return LoggingNotificationService()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing sub (user id), email, role, company

    Raises:
        ClientError: 401 if the header is missing or the token is invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Access token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_access_token(credentials.credentials)
    if payload is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload
