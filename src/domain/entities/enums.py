"""
Business Suite Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user within their company"""

    owner = "owner"
    admin = "admin"
    manager = "manager"
    employee = "employee"
    accountant = "accountant"
    sales_rep = "sales_rep"
    hr_manager = "hr_manager"


class TokenKind(str, Enum):
    """Purpose a single-use token was issued for"""

    email_verification = "email_verification"
    password_reset = "password_reset"
    invite = "invite"


class EmployeeStatus(str, Enum):
    """Employment status"""

    active = "active"
    inactive = "inactive"
    terminated = "terminated"


class InviteState(str, Enum):
    """Derived lifecycle state of an invite token"""

    pending = "pending"
    expired = "expired"
    accepted = "accepted"
    superseded = "superseded"
