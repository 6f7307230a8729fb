"""
Login Use Case

Handles user authentication and returns a credential pair.
"""

import logging

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_token_pair
from src.app.services.passwords import verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import CompanyInfo, LoginResponse, UserInfo

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email still costs one bcrypt comparison (timing parity)
    - Same error for unknown email and wrong password
    - Deactivated accounts cannot log in
    - Updates user.last_login_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing user, company and tokens, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            password_valid = await verify_password(
                password, user.password_hash if user else None
            )
            if user is None or not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not user.is_active:
                return Return.err(Error("ACCOUNT_DEACTIVATED", "Account is deactivated"))

            company = await self.uow.companies.get_by_id(user.company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            user.last_login_at = utcnow()
            user = await self.uow.users.update(user)

            await self.uow.commit()

        logger.info(f"User logged in: {user.email}")

        return Return.ok(
            LoginResponse(
                user=UserInfo.from_user(user),
                company=CompanyInfo.from_company(company),
                tokens=generate_token_pair(user),
            )
        )
