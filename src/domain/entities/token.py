"""
Token Entity

Single-use, time-bounded capability grants.
"""

import hashlib
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import InviteState, TokenKind, UserRole
from .payloads import TokenPayload, token_payload_adapter


def hash_token_value(value: str) -> str:
    """SHA-256 hex digest of an opaque token value, the only form that is stored."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


class Token(SQLModel, table=True):
    """
    Token entity - email verification, password reset and invite grants.

    Business Rules:
    - Token value is 256 bits from secrets; only its SHA-256 hash is stored
    - A consumed token never authorizes anything
    - An expired token never authorizes anything, consumed or not
    - Consumed exactly once, through a conditional update
    - Deleted only when invite email dispatch fails right after issuance
    - Invite tokens carry email, role, company and an optional typed payload
    """

    __tablename__ = "tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    token_hash: str = Field(unique=True, max_length=64)
    kind: TokenKind = Field(nullable=False)

    # Verification and reset tokens point at an existing user
    user_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    # Invite tokens describe the account to be created
    email: Optional[str] = Field(default=None, max_length=255)
    role: Optional[UserRole] = Field(default=None)
    company_id: Optional[UUID] = Field(default=None, foreign_key="companies.id")
    payload: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    consumed: bool = Field(default=False)
    consumed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_token_hash_kind", "token_hash", "kind"),
        Index("idx_token_email_kind", "email", "kind"),
        Index("idx_token_user_kind", "user_id", "kind"),
        Index("idx_token_expires_at", "expires_at"),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at <= (now or utcnow())

    def parsed_payload(self) -> Optional[TokenPayload]:
        if not self.payload:
            return None
        return token_payload_adapter.validate_python(self.payload)


def resolve_invite_state(
    token: Token, user_exists: bool, now: Optional[datetime] = None
) -> InviteState:
    """
    Derive the lifecycle state of an invite.

    Accepted wins over everything else; an account registered under the
    invited email supersedes a still-open invite.
    """
    if token.consumed:
        return InviteState.accepted
    if user_exists:
        return InviteState.superseded
    if token.is_expired(now):
        return InviteState.expired
    return InviteState.pending
