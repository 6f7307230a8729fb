"""
Token Issuer

Creates, validates and consumes single-use capability tokens.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Token, TokenKind, UserRole, hash_token_value

logger = logging.getLogger(__name__)

EMAIL_VERIFICATION_TTL = timedelta(hours=24)
PASSWORD_RESET_TTL = timedelta(hours=1)
INVITE_TTL = timedelta(days=7)


@dataclass(frozen=True)
class IssuedToken:
    """Plain token value (handed to the recipient once) and its stored record"""

    value: str
    record: Token


class TokenIssuer:
    """
    Issues and consumes tokens through the caller's unit of work.

    The issuer never commits and never notifies; both are the caller's job.
    Lookup misses, expiry and prior consumption are reported identically
    (None) so callers cannot leak which one happened.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def issue(
        self,
        kind: TokenKind,
        ttl: timedelta,
        email: Optional[str] = None,
        role: Optional[UserRole] = None,
        company_id: Optional[UUID] = None,
        payload: Optional[dict] = None,
        user_id: Optional[UUID] = None,
    ) -> IssuedToken:
        # 32 bytes -> 256 bits of entropy
        value = secrets.token_urlsafe(32)

        token = Token(
            token_hash=hash_token_value(value),
            kind=kind,
            user_id=user_id,
            email=email.strip().lower() if email else None,
            role=role,
            company_id=company_id,
            payload=payload,
            consumed=False,
            expires_at=utcnow() + ttl,
        )
        token = await self.uow.tokens.create(token)

        logger.debug(f"Issued {kind.value} token {token.id} expiring {token.expires_at}")
        return IssuedToken(value=value, record=token)

    async def validate_and_consume(self, value: str, kind: TokenKind) -> Optional[Token]:
        if not value:
            return None
        return await self.uow.tokens.consume(hash_token_value(value), kind, utcnow())

    async def discard(self, token: Token) -> None:
        await self.uow.tokens.delete(token)

    async def discard_for_user(self, user_id: UUID, kind: TokenKind) -> int:
        return await self.uow.tokens.delete_by_user_and_kind(user_id, kind)
