"""
User Management DTOs
"""

from pydantic import BaseModel

from src.app.use_cases.auth.dtos import UserInfo
from src.domain.entities import User


class UserStatusResponse(BaseModel):
    """Result of a role or account status change"""

    status: str
    user: UserInfo
    is_active: bool

    @classmethod
    def from_user(cls, user: User, status: str) -> "UserStatusResponse":
        return cls(status=status, user=UserInfo.from_user(user), is_active=user.is_active)
