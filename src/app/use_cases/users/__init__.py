"""
User Management Use Cases

Role changes and account activation within a company.
"""

from .change_role_use_case import ChangeRoleUseCase
from .set_user_active_use_case import SetUserActiveUseCase
from .dtos import UserStatusResponse

__all__ = [
    "ChangeRoleUseCase",
    "SetUserActiveUseCase",
    "UserStatusResponse",
]
