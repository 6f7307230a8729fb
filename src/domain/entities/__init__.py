"""
Business Suite Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    EmployeeStatus,
    InviteState,
    TokenKind,
    UserRole,
)

# Export all entities
from .company import Company
from .user import User
from .token import Token, hash_token_value, resolve_invite_state
from .department import Department
from .employee import Employee
from .payloads import (
    Address,
    EmergencyContact,
    EmployeeProvisioning,
    InviteeProfile,
    TokenPayload,
)

__all__ = [
    # Enums
    "EmployeeStatus",
    "InviteState",
    "TokenKind",
    "UserRole",
    # Entities
    "Company",
    "User",
    "Token",
    "Department",
    "Employee",
    # Payloads
    "Address",
    "EmergencyContact",
    "EmployeeProvisioning",
    "InviteeProfile",
    "TokenPayload",
    # Helpers
    "hash_token_value",
    "resolve_invite_state",
]
