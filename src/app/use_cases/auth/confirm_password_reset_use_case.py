"""
Confirm Password Reset Use Case

Sets a new password using a single-use reset token.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.passwords import hash_password
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TokenKind
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token consumed atomically and committed before the user lookup;
      it stays burned even if the reset fails afterwards
    - Unknown, expired and reused tokens are indistinguishable to the caller
    - Password strength is validated at the API boundary
    - Password is hashed with bcrypt
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str, new_password: str) -> Result[MessageResponse]:
        """
        Execute confirm password reset use case.

        Errors:
            - INVALID_OR_EXPIRED_TOKEN: Token not found, expired or already used
            - USER_NOT_FOUND: Token points at a user that no longer exists
        """
        async with self.uow:
            record = await TokenIssuer(self.uow).validate_and_consume(
                token, TokenKind.password_reset
            )
            if record is None or record.user_id is None:
                return Return.err(
                    Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired reset token")
                )
            await self.uow.commit()

        async with self.uow:
            user = await self.uow.users.get_by_id(record.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.password_hash = await hash_password(new_password)
            await self.uow.users.update(user)

            await self.uow.commit()

        logger.info(f"Password reset successful for: {user.email}")

        return Return.ok(
            MessageResponse(status="success", message="Password reset successful")
        )
