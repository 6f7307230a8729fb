from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Employee


class IEmployeeRepository(ABC):
    """Employee repository interface - application layer"""

    @abstractmethod
    async def get_by_employee_id(
        self, company_id: UUID, employee_id: str
    ) -> Optional[Employee]:
        """Get employee by company and employee identifier"""
        pass

    @abstractmethod
    async def get_by_email(self, company_id: UUID, email: str) -> Optional[Employee]:
        """Get employee by company and email"""
        pass

    @abstractmethod
    async def create(self, employee: Employee) -> Employee:
        """Create an employee, raising DuplicateKeyError on a uniqueness clash"""
        pass
