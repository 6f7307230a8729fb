from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.employee_repository import IEmployeeRepository
from src.app.repositories.errors import DuplicateKeyError
from src.domain.entities import Employee


class EmployeeRepository(IEmployeeRepository):
    """Employee repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_employee_id(
        self, company_id: UUID, employee_id: str
    ) -> Optional[Employee]:
        stmt = select(Employee).where(
            Employee.company_id == company_id, Employee.employee_id == employee_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, company_id: UUID, email: str) -> Optional[Employee]:
        stmt = select(Employee).where(
            Employee.company_id == company_id, Employee.email == email.strip().lower()
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, employee: Employee) -> Employee:
        employee.email = employee.email.strip().lower()
        self.session.add(employee)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateKeyError("employee", employee.employee_id) from exc
        await self.session.refresh(employee)
        return employee
