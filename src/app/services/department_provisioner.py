"""
Department Auto-Provisioner

Makes sure a department exists before an employee is attached to it.
"""

import logging
from uuid import UUID

from src.app.repositories.errors import DuplicateKeyError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Department

logger = logging.getLogger(__name__)


class DepartmentProvisioner:
    """
    Idempotently ensures (company, name) exists and counts one more employee.

    The increment is a single UPDATE. When the department is missing it is
    created with a count of one; if a concurrent caller created it first the
    uniqueness constraint wins and the increment is retried.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def ensure(self, company_id: UUID, name: str) -> Department:
        name = name.strip()

        department = await self.uow.departments.increment_employee_count(company_id, name)
        if department is not None:
            return department

        try:
            department = await self.uow.departments.create(
                Department(
                    company_id=company_id,
                    name=name,
                    employee_count=1,
                    is_active=True,
                )
            )
        except DuplicateKeyError:
            logger.info(f"Department '{name}' created concurrently, incrementing instead")
            department = await self.uow.departments.increment_employee_count(
                company_id, name
            )
            if department is None:
                raise
            return department

        logger.info(f"New department created: {name} for company {company_id}")
        return department
