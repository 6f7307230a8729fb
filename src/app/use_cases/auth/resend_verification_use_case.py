"""
Resend Verification Email Use Case

Replaces a user's verification token and emails the new link.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.links import frontend_link
from src.app.services.notification_service import (
    INotificationService,
    NotificationKind,
    dispatch_best_effort,
)
from src.app.services.token_issuer import EMAIL_VERIFICATION_TTL, TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TokenKind
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class ResendVerificationUseCase:
    """
    Use case for resending email verification.

    Business Rules:
    - Caller is the authenticated user
    - Already verified users get EMAIL_ALREADY_VERIFIED
    - Previous verification tokens are deleted before a new one is issued
    - New token expires in 24 hours
    """

    def __init__(self, uow: UnitOfWork, notifier: INotificationService):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, user_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.email_verified:
                return Return.err(
                    Error("EMAIL_ALREADY_VERIFIED", "Email already verified")
                )

            issuer = TokenIssuer(self.uow)
            await issuer.discard_for_user(user.id, TokenKind.email_verification)
            verification = await issuer.issue(
                TokenKind.email_verification,
                EMAIL_VERIFICATION_TTL,
                user_id=user.id,
            )

            await self.uow.commit()

        await dispatch_best_effort(
            self.notifier,
            NotificationKind.email_verification,
            user.email,
            {"verification_link": frontend_link("auth/verify-email", token=verification.value)},
        )

        return Return.ok(MessageResponse(status="sent", message="Verification email sent"))
