"""
Request Password Reset Use Case

Issues a password reset token and emails the link.
"""

import logging

from libs.result import Result, Return
from src.app.services.links import frontend_link
from src.app.services.notification_service import (
    INotificationService,
    NotificationKind,
    dispatch_best_effort,
)
from src.app.services.token_issuer import PASSWORD_RESET_TTL, TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TokenKind
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

RESET_LINK_SENT = "If an account with that email exists, we've sent a password reset link."


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Token expires in 1 hour
    - No email enumeration: same response whether or not the account exists
    - Email delivery failure is logged, never reported to the caller
    """

    def __init__(self, uow: UnitOfWork, notifier: INotificationService):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, email: str) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None or not user.is_active:
                return Return.ok(MessageResponse(status="sent", message=RESET_LINK_SENT))

            reset = await TokenIssuer(self.uow).issue(
                TokenKind.password_reset,
                PASSWORD_RESET_TTL,
                user_id=user.id,
            )

            await self.uow.commit()

        await dispatch_best_effort(
            self.notifier,
            NotificationKind.password_reset,
            user.email,
            {
                "user_name": user.full_name,
                "reset_link": frontend_link("auth/reset-password", token=reset.value),
            },
        )

        logger.info(f"Password reset requested for: {user.email}")

        return Return.ok(MessageResponse(status="sent", message=RESET_LINK_SENT))
