from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Department


class IDepartmentRepository(ABC):
    """Department repository interface - application layer"""

    @abstractmethod
    async def get_by_name(self, company_id: UUID, name: str) -> Optional[Department]:
        """Get department by company and name"""
        pass

    @abstractmethod
    async def increment_employee_count(
        self, company_id: UUID, name: str
    ) -> Optional[Department]:
        """
        Atomically add one to employee_count.

        Returns the updated department, or None if it does not exist.
        """
        pass

    @abstractmethod
    async def create(self, department: Department) -> Department:
        """Create a department, raising DuplicateKeyError on (company, name) clash"""
        pass
