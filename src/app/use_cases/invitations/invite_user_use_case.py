"""
Invite User Use Case

Issues an invite token for a new company member and emails the accept link.
"""

import logging
from typing import Iterable
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.links import frontend_link
from src.app.services.notification_service import (
    INotificationService,
    NotificationKind,
    dispatch_best_effort,
)
from src.app.services.token_issuer import INVITE_TTL, TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import InviteeProfile, Token, TokenKind, UserRole
from .dtos import InviteUserCommand, InviteUserResponse

logger = logging.getLogger(__name__)

INVITER_ROLES = (UserRole.owner, UserRole.admin)


class InviteUserUseCase:
    """
    Use case for inviting a user into the inviter's company.

    Business Rules:
    - Inviter must be active and hold one of the inviter roles
    - Nobody can be invited as owner
    - An employee payload only goes with the employee role
    - Email must not belong to an existing user
    - Token is committed before the email is sent
    - If the email cannot be sent the token is deleted again and the
      caller gets INVITE_DISPATCH_FAILED
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: INotificationService,
        inviter_roles: Iterable[UserRole] = INVITER_ROLES,
    ):
        self.uow = uow
        self.notifier = notifier
        self.inviter_roles = tuple(inviter_roles)

    async def execute(
        self, inviter_id: UUID, command: InviteUserCommand
    ) -> Result[InviteUserResponse]:
        try:
            role = UserRole(command.role)
        except ValueError:
            return Return.err(Error("INVALID_ROLE", f"Invalid role: {command.role}"))

        if role == UserRole.owner:
            return Return.err(Error("INVALID_ROLE", "Cannot invite a user as owner"))

        if command.employee is not None and role != UserRole.employee:
            return Return.err(
                Error("INVALID_ROLE", "Employee details require the employee role")
            )

        email = command.email.strip().lower()

        async with self.uow:
            inviter = await self.uow.users.get_by_id(inviter_id)
            if inviter is None or not inviter.is_active:
                return Return.err(Error("USER_NOT_FOUND", "Inviter not found"))

            if inviter.role not in self.inviter_roles:
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "You are not allowed to invite users")
                )

            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(
                    Error("USER_ALREADY_EXISTS", "User with this email already exists")
                )

            company = await self.uow.companies.get_by_id(inviter.company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            payload = command.employee or InviteeProfile(
                first_name=command.first_name,
                last_name=command.last_name,
                department=command.department,
            )

            issuer = TokenIssuer(self.uow)
            invite = await issuer.issue(
                TokenKind.invite,
                INVITE_TTL,
                email=email,
                role=role,
                company_id=company.id,
                payload=payload.model_dump(mode="json"),
            )

            await self.uow.commit()

        template_data = {
            "invitee_name": f"{command.first_name} {command.last_name}",
            "inviter_name": inviter.full_name,
            "company_name": company.name,
            "role": role.value,
            "position": command.employee.position if command.employee else None,
            "department": payload.department,
            "invite_link": frontend_link("auth/accept-invite", token=invite.value),
        }
        sent = await dispatch_best_effort(
            self.notifier, NotificationKind.invite, email, template_data
        )

        if not sent:
            await self._withdraw(issuer, invite.record)
            return Return.err(
                Error(
                    "INVITE_DISPATCH_FAILED",
                    "Failed to send invitation email. Please try again.",
                )
            )

        logger.info(f"Invite sent to {email} as {role.value} by {inviter.email}")

        return Return.ok(
            InviteUserResponse(
                email=email,
                role=role.value,
                expires_at=invite.record.expires_at.isoformat(),
            )
        )

    async def _withdraw(self, issuer: TokenIssuer, token: Token) -> None:
        token_id, email = token.id, token.email
        try:
            async with self.uow:
                await issuer.discard(token)
                await self.uow.commit()
        except Exception:
            logger.exception(
                f"Failed to delete orphaned invite token {token_id} for {email}"
            )
        else:
            logger.warning(f"Invite token {token_id} for {email} withdrawn after dispatch failure")
