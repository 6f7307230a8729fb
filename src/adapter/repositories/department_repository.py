from typing import Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.department_repository import IDepartmentRepository
from src.app.repositories.errors import DuplicateKeyError
from src.domain.entities import Department


class DepartmentRepository(IDepartmentRepository):
    """Department repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_name(self, company_id: UUID, name: str) -> Optional[Department]:
        """Get department by company and name"""
        stmt = (
            select(Department)
            .where(Department.company_id == company_id, Department.name == name)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def increment_employee_count(
        self, company_id: UUID, name: str
    ) -> Optional[Department]:
        """Atomically add one to employee_count"""
        stmt = (
            update(Department)
            .where(Department.company_id == company_id, Department.name == name)
            .values(employee_count=Department.employee_count + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.exec(stmt)
        if result.rowcount == 0:
            return None
        return await self.get_by_name(company_id, name)

    async def create(self, department: Department) -> Department:
        """Create a department inside a savepoint so a clash leaves the transaction usable"""
        try:
            async with self.session.begin_nested():
                self.session.add(department)
        except IntegrityError as exc:
            raise DuplicateKeyError("department", department.name) from exc
        await self.session.refresh(department)
        return department
