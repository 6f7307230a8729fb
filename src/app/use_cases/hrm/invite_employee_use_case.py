"""
Invite Employee Use Case

HR-flavored invite: the Employee row is provisioned when the invite is accepted.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invitations import InviteUserCommand, InviteUserUseCase
from src.domain.entities import EmployeeProvisioning, UserRole
from .dtos import InviteEmployeeCommand, InviteEmployeeResponse

logger = logging.getLogger(__name__)

HR_ROLES = (UserRole.owner, UserRole.admin, UserRole.hr_manager)


class InviteEmployeeUseCase:
    """
    Use case for inviting an employee.

    Business Rules:
    - Inviter must be owner, admin or hr_manager
    - Employee ID and email must be unused within the company
    - Email must not belong to an existing user
    - No Employee row exists until the invite is accepted
    - Dispatch failure removes the invite (see InviteUserUseCase)
    """

    def __init__(self, uow: UnitOfWork, notifier: INotificationService):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, inviter_id: UUID, command: InviteEmployeeCommand
    ) -> Result[InviteEmployeeResponse]:
        async with self.uow:
            inviter = await self.uow.users.get_by_id(inviter_id)
            if inviter is None or not inviter.is_active:
                return Return.err(Error("USER_NOT_FOUND", "Inviter not found"))

            if inviter.role not in HR_ROLES:
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You are not allowed to invite employees")
                )
            inviter_email = inviter.email

            clash = await self.uow.employees.get_by_employee_id(
                inviter.company_id, command.employee_id
            ) or await self.uow.employees.get_by_email(inviter.company_id, command.email)
            if clash:
                return Return.err(
                    Error(
                        "EMPLOYEE_ALREADY_EXISTS",
                        "Employee with this ID or email already exists",
                    )
                )

        provisioning = EmployeeProvisioning(
            employee_id=command.employee_id,
            first_name=command.first_name,
            last_name=command.last_name,
            phone=command.phone,
            department=command.department.strip(),
            position=command.position,
            hire_date=command.hire_date,
            salary=command.salary,
            manager_id=command.manager_id,
            address=command.address,
            emergency_contact=command.emergency_contact,
        )

        result = await InviteUserUseCase(
            self.uow, self.notifier, inviter_roles=HR_ROLES
        ).execute(
            inviter_id,
            InviteUserCommand(
                email=command.email,
                role=UserRole.employee.value,
                first_name=command.first_name,
                last_name=command.last_name,
                department=provisioning.department,
                employee=provisioning,
            ),
        )
        if result.is_err():
            return result

        invite = result.value
        logger.info(
            f"Employee invitation sent: {invite.email} to {provisioning.department} "
            f"by {inviter_email}"
        )

        return Return.ok(
            InviteEmployeeResponse(
                email=invite.email,
                first_name=command.first_name,
                last_name=command.last_name,
                department=provisioning.department,
                position=command.position,
                expires_at=invite.expires_at,
            )
        )
