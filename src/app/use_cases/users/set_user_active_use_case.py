"""
Set User Active Use Case

Deactivates or reactivates a user account. Accounts are never hard-deleted.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole
from .dtos import UserStatusResponse

logger = logging.getLogger(__name__)

ADMIN_ROLES = (UserRole.owner, UserRole.admin)


class SetUserActiveUseCase:
    """
    Use case for deactivating and reactivating users.

    Business Rules:
    - Only owner/admin can change the active flag
    - Target user must belong to the caller's company
    - The owner cannot be deactivated
    - Nobody can deactivate themselves
    - Deactivated users cannot log in or refresh credentials
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_user_id: UUID, target_user_id: UUID, active: bool
    ) -> Result[UserStatusResponse]:
        async with self.uow:
            actor = await self.uow.users.get_by_id(actor_user_id)
            if actor is None or not actor.is_active:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if actor.role not in ADMIN_ROLES:
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "Only owner or admin can change account status")
                )

            target = await self.uow.users.get_by_id(target_user_id)
            if target is None or target.company_id != actor.company_id:
                return Return.err(
                    Error("TARGET_USER_NOT_FOUND", "User not found in this company")
                )

            if not active:
                if target.role == UserRole.owner:
                    return Return.err(
                        Error("CANNOT_DEACTIVATE_OWNER", "Cannot deactivate the owner")
                    )
                if target.id == actor.id:
                    return Return.err(
                        Error("CANNOT_DEACTIVATE_SELF", "Cannot deactivate yourself")
                    )

            target.is_active = active
            await self.uow.users.update(target)
            await self.uow.commit()

            action = "activated" if active else "deactivated"
            logger.info(f"User {action}: {target.email} by {actor.email}")

            return Return.ok(UserStatusResponse.from_user(target, status=action))
