"""
HRM Use Case DTOs

Employee invitation commands and responses.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Address, EmergencyContact


class InviteEmployeeCommand(BaseModel):
    """Employee invite - the employment record is only created on acceptance"""

    employee_id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department: str
    position: str
    hire_date: date
    salary: Optional[float] = None
    manager_id: Optional[UUID] = None
    address: Optional[Address] = None
    emergency_contact: Optional[EmergencyContact] = None


class InviteEmployeeResponse(BaseModel):
    """Invitation summary; the invited person is not an employee yet"""

    email: str
    first_name: str
    last_name: str
    department: str
    position: str
    status: str = "invited"
    expires_at: str


class PendingEmployeeInvitation(BaseModel):
    email: str
    employee_id: str
    first_name: str
    last_name: str
    department: str
    position: str
    hire_date: date
    invited_at: str
    expires_at: str


class PendingEmployeeInvitationsResponse(BaseModel):
    invitations: List[PendingEmployeeInvitation]
    total: int
