from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Token, TokenKind, UserRole


class ITokenRepository(ABC):
    """Token repository interface - application layer"""

    @abstractmethod
    async def create(self, token: Token) -> Token:
        """Persist a newly issued token"""
        pass

    @abstractmethod
    async def consume(
        self, token_hash: str, kind: TokenKind, now: datetime
    ) -> Optional[Token]:
        """
        Atomically mark an unconsumed, unexpired token as consumed.

        Returns the token when this call performed the transition, None when
        the token is missing, expired or was already consumed.
        """
        pass

    @abstractmethod
    async def delete(self, token: Token) -> None:
        """Delete a token"""
        pass

    @abstractmethod
    async def delete_by_user_and_kind(self, user_id: UUID, kind: TokenKind) -> int:
        """Delete all tokens of a kind issued for a user, returning the count"""
        pass

    @abstractmethod
    async def list_open_invites(
        self, company_id: UUID, role: UserRole, now: datetime
    ) -> List[Token]:
        """Unconsumed, unexpired invite tokens for a company and target role"""
        pass
