"""
Invitation Use Cases

Issuing invites and turning them into accounts.
"""

from .invite_user_use_case import INVITER_ROLES, InviteUserUseCase
from .accept_invite_use_case import AcceptInviteUseCase
from .dtos import (
    AcceptInviteCommand,
    AcceptInviteResponse,
    EmployeeInfo,
    InviteUserCommand,
    InviteUserResponse,
)

__all__ = [
    # Use Cases
    "InviteUserUseCase",
    "AcceptInviteUseCase",
    "INVITER_ROLES",
    # DTOs - Commands
    "InviteUserCommand",
    "AcceptInviteCommand",
    # DTOs - Responses
    "InviteUserResponse",
    "AcceptInviteResponse",
    "EmployeeInfo",
]
