from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import (
    EmployeeProvisioning,
    InviteState,
    UserRole,
    resolve_invite_state,
)
from .dtos import PendingEmployeeInvitation, PendingEmployeeInvitationsResponse
from .invite_employee_use_case import HR_ROLES


class ListPendingEmployeeInvitationsUseCase:
    """
    Lists employee invites of the caller's company that can still be accepted.

    Invites whose email has since been registered are superseded and left out.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[PendingEmployeeInvitationsResponse]:
        now = utcnow()

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user.is_active:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.role not in HR_ROLES:
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You are not allowed to view invitations")
                )

            tokens = await self.uow.tokens.list_open_invites(
                user.company_id, UserRole.employee, now
            )

            invitations = []
            for token in tokens:
                payload = token.parsed_payload()
                if not isinstance(payload, EmployeeProvisioning):
                    continue

                registered = await self.uow.users.get_by_email(token.email)
                if resolve_invite_state(token, registered is not None, now) != InviteState.pending:
                    continue

                invitations.append(
                    PendingEmployeeInvitation(
                        email=token.email,
                        employee_id=payload.employee_id,
                        first_name=payload.first_name,
                        last_name=payload.last_name,
                        department=payload.department,
                        position=payload.position,
                        hire_date=payload.hire_date,
                        invited_at=token.created_at.isoformat(),
                        expires_at=token.expires_at.isoformat(),
                    )
                )

        return Return.ok(
            PendingEmployeeInvitationsResponse(
                invitations=invitations, total=len(invitations)
            )
        )
