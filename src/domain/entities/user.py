"""
User Entity

The authentication-facing principal.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - an authenticated principal scoped to one company.

    Business Rules:
    - Email is unique across the whole system (stored lower-cased)
    - Password stored as bcrypt hash; absent for externally authenticated accounts
    - Users created through an invite are email-verified
    - The owner role is only ever assigned at signup
    - Never hard-deleted, only deactivated (is_active = False)
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: Optional[str] = Field(default=None, max_length=60)

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    phone: Optional[str] = Field(default=None, max_length=50)

    role: UserRole = Field(default=UserRole.employee)
    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)
    department: Optional[str] = Field(default=None, max_length=100)

    email_verified: bool = Field(default=False)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_user_role_company", "role", "company_id"),
        Index("idx_user_active_company", "is_active", "company_id"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
