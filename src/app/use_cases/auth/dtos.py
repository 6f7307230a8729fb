"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional

from pydantic import BaseModel

from src.api.utils.jwt import TokenPair
from src.domain.entities import Company, User


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    email: str
    password: str
    first_name: str
    last_name: str
    company_name: str
    phone: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public view of a user (never includes the password hash)"""

    id: str
    email: str
    first_name: str
    last_name: str
    role: str
    email_verified: bool
    company_id: str
    department: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role.value,
            email_verified=user.email_verified,
            company_id=str(user.company_id),
            department=user.department,
        )


class CompanyInfo(BaseModel):
    """Company information in authentication responses"""

    id: str
    name: str

    @classmethod
    def from_company(cls, company: Company) -> "CompanyInfo":
        return cls(id=str(company.id), name=company.name)


class SignupResponse(BaseModel):
    """Response for signup use case"""

    user: UserInfo
    company: CompanyInfo
    tokens: TokenPair


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user: UserInfo
    company: CompanyInfo
    tokens: TokenPair


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case"""

    tokens: TokenPair


class CurrentUserResponse(BaseModel):
    """Response for load current user use case"""

    user: UserInfo
    company: CompanyInfo
    last_login_at: Optional[str] = None


class MessageResponse(BaseModel):
    """Status/message response shared by the token-driven flows"""

    status: str
    message: str
