from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.token_repository import ITokenRepository
from src.domain.entities import Token, TokenKind, UserRole


class TokenRepository(ITokenRepository):
    """Token repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: Token) -> Token:
        """Persist a newly issued token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def consume(
        self, token_hash: str, kind: TokenKind, now: datetime
    ) -> Optional[Token]:
        """Compare-and-set consumed False -> True in a single UPDATE"""
        stmt = (
            update(Token)
            .where(
                Token.token_hash == token_hash,
                Token.kind == kind,
                Token.consumed.is_(False),
                Token.expires_at > now,
            )
            .values(consumed=True, consumed_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.exec(stmt)
        if result.rowcount != 1:
            return None

        stmt = (
            select(Token)
            .where(Token.token_hash == token_hash)
            .execution_options(populate_existing=True)
        )
        fetched = await self.session.exec(stmt)
        return fetched.one()

    async def delete(self, token: Token) -> None:
        """Delete a token"""
        await self.session.delete(token)
        await self.session.flush()

    async def delete_by_user_and_kind(self, user_id: UUID, kind: TokenKind) -> int:
        """Delete all tokens of a kind issued for a user"""
        stmt = (
            delete(Token)
            .where(Token.user_id == user_id, Token.kind == kind)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.exec(stmt)
        return result.rowcount

    async def list_open_invites(
        self, company_id: UUID, role: UserRole, now: datetime
    ) -> List[Token]:
        """Unconsumed, unexpired invite tokens for a company and target role"""
        stmt = (
            select(Token)
            .where(
                Token.company_id == company_id,
                Token.kind == TokenKind.invite,
                Token.role == role,
                Token.consumed.is_(False),
                Token.expires_at > now,
            )
            .order_by(Token.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())
