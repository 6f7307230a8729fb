"""
Department Entity

Named organizational unit within a company.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Department(SQLModel, table=True):
    """
    Department entity.

    Business Rules:
    - (company_id, name) is unique
    - employee_count is denormalized and incremented as employees attach;
      drift is not reconciled
    - Auto-created the first time an accepted employee invite references it
    """

    __tablename__ = "departments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_id: UUID = Field(foreign_key="companies.id", nullable=False, index=True)

    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    manager_id: Optional[UUID] = Field(default=None)

    employee_count: int = Field(default=0, ge=0)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_department_company_name", "company_id", "name", unique=True),
    )
