"""
Company Entity

The tenant: an isolated organization scope that owns users, departments and employees.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Company(SQLModel, table=True):
    """
    Company entity - the tenant boundary.

    Business Rules:
    - Created together with its owner at signup
    - Every user, department and employee belongs to exactly one company
    """

    __tablename__ = "companies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    # Set once the owner user row exists
    owner_id: Optional[UUID] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
