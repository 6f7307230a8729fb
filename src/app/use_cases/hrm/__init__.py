"""
HRM Use Cases

Employee onboarding through invitations.
"""

from .invite_employee_use_case import HR_ROLES, InviteEmployeeUseCase
from .list_pending_employee_invitations_use_case import (
    ListPendingEmployeeInvitationsUseCase,
)
from .dtos import (
    InviteEmployeeCommand,
    InviteEmployeeResponse,
    PendingEmployeeInvitation,
    PendingEmployeeInvitationsResponse,
)

__all__ = [
    # Use Cases
    "InviteEmployeeUseCase",
    "ListPendingEmployeeInvitationsUseCase",
    "HR_ROLES",
    # DTOs
    "InviteEmployeeCommand",
    "InviteEmployeeResponse",
    "PendingEmployeeInvitation",
    "PendingEmployeeInvitationsResponse",
]
