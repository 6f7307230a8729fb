"""
Invitation Use Case DTOs

Commands and responses for issuing and accepting invites.
"""

from typing import Optional

from pydantic import BaseModel

from src.api.utils.jwt import TokenPair
from src.app.use_cases.auth.dtos import UserInfo
from src.domain.entities import Employee, EmployeeProvisioning


# ============================================================================
# Command DTOs
# ============================================================================


class InviteUserCommand(BaseModel):
    """
    Invite command - who is being invited and as what.

    When ``employee`` is set the invite provisions an Employee on acceptance.
    """

    email: str
    role: str
    first_name: str
    last_name: str
    department: Optional[str] = None
    employee: Optional[EmployeeProvisioning] = None


class AcceptInviteCommand(BaseModel):
    """Accept command - password already checked against the policy"""

    token: str
    password: str
    first_name: str
    last_name: str


# ============================================================================
# Response DTOs
# ============================================================================


class InviteUserResponse(BaseModel):
    email: str
    role: str
    expires_at: str


class EmployeeInfo(BaseModel):
    """Employee created when an employee invite is accepted"""

    id: str
    employee_id: str
    department: str
    position: str
    status: str

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeInfo":
        return cls(
            id=str(employee.id),
            employee_id=employee.employee_id,
            department=employee.department,
            position=employee.position,
            status=employee.status.value,
        )


class AcceptInviteResponse(BaseModel):
    user: UserInfo
    tokens: TokenPair
    employee: Optional[EmployeeInfo] = None
