"""
Change User Role Use Case

Handles changing a user's role within their company.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole
from .dtos import UserStatusResponse

logger = logging.getLogger(__name__)


class ChangeRoleUseCase:
    """
    Use case for changing a user's role within a company.

    Business Rules:
    - Only the owner can change roles
    - Target user must belong to the owner's company
    - The owner role is never assigned and the owner is never re-roled
    - User's existing JWT keeps the old role claim until expiry
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, owner_user_id: UUID, target_user_id: UUID, new_role: str
    ) -> Result[UserStatusResponse]:
        """
        Execute change role use case.

        Args:
            owner_user_id: User ID of the owner making the change
            target_user_id: User ID whose role is being changed
            new_role: New role to assign (any role except owner)

        Returns:
            Result with the updated user, or Error
        """
        try:
            role = UserRole(new_role)
        except ValueError:
            role = None
        if role is None or role == UserRole.owner:
            assignable = ", ".join(r.value for r in UserRole if r != UserRole.owner)
            return Return.err(
                Error("INVALID_ROLE", f"Invalid role: {new_role}. Must be one of: {assignable}")
            )

        async with self.uow:
            owner = await self.uow.users.get_by_id(owner_user_id)
            if owner is None or not owner.is_active:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if owner.role != UserRole.owner:
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "Only the owner can change user roles")
                )

            target = await self.uow.users.get_by_id(target_user_id)
            if target is None or target.company_id != owner.company_id:
                return Return.err(
                    Error("TARGET_USER_NOT_FOUND", "User not found in this company")
                )

            if target.role == UserRole.owner:
                return Return.err(
                    Error("CANNOT_CHANGE_OWNER", "Cannot change the owner's role")
                )

            old_role = target.role.value
            target.role = role
            await self.uow.users.update(target)
            await self.uow.commit()

            logger.info(
                f"User role updated: {target.email} {old_role} -> {role.value} by {owner.email}"
            )

            return Return.ok(UserStatusResponse.from_user(target, status="updated"))
