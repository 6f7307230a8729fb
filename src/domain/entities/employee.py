"""
Employee Entity

HR-facing record of a person employed by a company.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Date, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import EmployeeStatus


class Employee(SQLModel, table=True):
    """
    Employee entity - distinct from the User used for authentication.

    Business Rules:
    - At most one employee per (company, employee_id) and per (company, email)
    - Created active when an employee invite is accepted; an invited person
      has no Employee row until then
    - user_id links back to the account created at acceptance
    """

    __tablename__ = "employees"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    employee_id: str = Field(max_length=20)

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)

    department: str = Field(max_length=100)
    position: str = Field(max_length=100)
    hire_date: date = Field(sa_column=Column(Date, nullable=False))
    salary: Optional[float] = Field(default=None, ge=0)

    status: EmployeeStatus = Field(default=EmployeeStatus.active)
    manager_id: Optional[UUID] = Field(default=None)

    address: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    emergency_contact: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)
    user_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_employee_company_employee_id", "company_id", "employee_id", unique=True),
        Index("idx_employee_company_email", "company_id", "email", unique=True),
        Index("idx_employee_company_status", "company_id", "status"),
    )
