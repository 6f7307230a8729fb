"""
Accept Invite Use Case

Turns an invite token into a user account, and for employee invites an
Employee record in an auto-provisioned department.
"""

import logging
from typing import Optional

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_token_pair
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.department_provisioner import DepartmentProvisioner
from src.app.services.links import frontend_link
from src.app.services.notification_service import (
    INotificationService,
    NotificationKind,
    dispatch_best_effort,
)
from src.app.services.passwords import hash_password
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    Employee,
    EmployeeProvisioning,
    EmployeeStatus,
    TokenKind,
    User,
    UserRole,
)
from src.app.use_cases.auth.dtos import UserInfo
from .dtos import AcceptInviteCommand, AcceptInviteResponse, EmployeeInfo

logger = logging.getLogger(__name__)


class AcceptInviteUseCase:
    """
    Use case for accepting an invite.

    Business Rules:
    - The token is consumed and committed first; it stays burned even if
      account creation fails afterwards
    - Email, role and company come from the token, never from the request
    - The new user is created verified and active
    - Employee invites also ensure the department and create an active
      Employee linked to the user, committed together with the user
    - Welcome email is best-effort
    """

    def __init__(self, uow: UnitOfWork, notifier: INotificationService):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, command: AcceptInviteCommand) -> Result[AcceptInviteResponse]:
        async with self.uow:
            invite = await TokenIssuer(self.uow).validate_and_consume(
                command.token, TokenKind.invite
            )
            if invite is None:
                return Return.err(
                    Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired invitation")
                )
            await self.uow.commit()

        payload = invite.parsed_payload()
        employee: Optional[Employee] = None

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(invite.email)
            if existing_user:
                return Return.err(
                    Error("USER_ALREADY_EXISTS", "User with this email already exists")
                )

            company = await self.uow.companies.get_by_id(invite.company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            password_hash = await hash_password(command.password)

            try:
                user = await self.uow.users.create(
                    User(
                        email=invite.email,
                        password_hash=password_hash,
                        first_name=command.first_name,
                        last_name=command.last_name,
                        phone=getattr(payload, "phone", None),
                        role=invite.role,
                        company_id=company.id,
                        department=payload.department if payload else None,
                        email_verified=True,
                        is_active=True,
                    )
                )
            except DuplicateKeyError:
                return Return.err(
                    Error("USER_ALREADY_EXISTS", "User with this email already exists")
                )

            if isinstance(payload, EmployeeProvisioning) and invite.role == UserRole.employee:
                department = await DepartmentProvisioner(self.uow).ensure(
                    company.id, payload.department
                )
                try:
                    employee = await self.uow.employees.create(
                        Employee(
                            employee_id=payload.employee_id,
                            first_name=payload.first_name,
                            last_name=payload.last_name,
                            email=user.email,
                            phone=payload.phone,
                            department=department.name,
                            position=payload.position,
                            hire_date=payload.hire_date,
                            salary=payload.salary,
                            manager_id=payload.manager_id,
                            status=EmployeeStatus.active,
                            address=payload.address.model_dump() if payload.address else None,
                            emergency_contact=(
                                payload.emergency_contact.model_dump()
                                if payload.emergency_contact
                                else None
                            ),
                            company_id=company.id,
                            user_id=user.id,
                        )
                    )
                except DuplicateKeyError:
                    return Return.err(
                        Error(
                            "EMPLOYEE_ALREADY_EXISTS",
                            "Employee with this ID or email already exists",
                        )
                    )

            await self.uow.commit()

        tokens = generate_token_pair(user)

        await dispatch_best_effort(
            self.notifier,
            NotificationKind.welcome,
            user.email,
            {
                "user_name": user.full_name,
                "company_name": company.name,
                "role": user.role.value,
                "login_link": frontend_link("auth/login"),
            },
        )

        logger.info(f"Invite accepted by {user.email} for company {company.name}")
        if employee is not None:
            logger.info(
                f"Employee {employee.employee_id} provisioned in {employee.department}"
            )

        return Return.ok(
            AcceptInviteResponse(
                user=UserInfo.from_user(user),
                tokens=tokens,
                employee=EmployeeInfo.from_employee(employee) if employee else None,
            )
        )
