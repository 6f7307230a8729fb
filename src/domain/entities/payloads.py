"""
Token Payloads

Typed data carried by invite tokens, discriminated on ``kind``.
"""

from datetime import date
from typing import Annotated, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field, TypeAdapter


class Address(BaseModel):
    street: str
    city: str
    state: str
    zip_code: str
    country: str


class EmergencyContact(BaseModel):
    name: str
    relationship: str
    phone: str


class InviteeProfile(BaseModel):
    """Profile details entered by the inviter on a plain user invite"""

    kind: Literal["invitee_profile"] = "invitee_profile"
    first_name: str
    last_name: str
    department: Optional[str] = None


class EmployeeProvisioning(BaseModel):
    """Employment data used to create the Employee row once the invite is accepted"""

    kind: Literal["employee_provisioning"] = "employee_provisioning"
    employee_id: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    department: str
    position: str
    hire_date: date
    salary: Optional[float] = None
    manager_id: Optional[UUID] = None
    address: Optional[Address] = None
    emergency_contact: Optional[EmergencyContact] = None


TokenPayload = Annotated[
    Union[InviteeProfile, EmployeeProvisioning], Field(discriminator="kind")
]

token_payload_adapter: TypeAdapter = TypeAdapter(TokenPayload)
