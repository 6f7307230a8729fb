"""
Verify Email Use Case

Handles email verification via single-use token.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TokenKind
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Token is consumed atomically; reuse, expiry and unknown tokens all
      report INVALID_OR_EXPIRED_TOKEN
    - Sets email_verified = True on the token's user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[MessageResponse]:
        async with self.uow:
            record = await TokenIssuer(self.uow).validate_and_consume(
                token, TokenKind.email_verification
            )
            if record is None or record.user_id is None:
                return Return.err(
                    Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired verification token")
                )

            user = await self.uow.users.get_by_id(record.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.email_verified = True
            await self.uow.users.update(user)

            await self.uow.commit()

        logger.info(f"Email verified for: {user.email}")

        return Return.ok(
            MessageResponse(status="verified", message="Email verified successfully")
        )
