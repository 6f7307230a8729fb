import logging

from libs.result import Error, Result, Return

from src.api.utils.jwt import generate_token_pair
from src.app.repositories.errors import DuplicateKeyError
from src.app.services.links import frontend_link
from src.app.services.notification_service import (
    INotificationService,
    NotificationKind,
    dispatch_best_effort,
)
from src.app.services.passwords import hash_password
from src.app.services.token_issuer import EMAIL_VERIFICATION_TTL, TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Company, TokenKind, User, UserRole
from .dtos import CompanyInfo, SignupCommand, SignupResponse, UserInfo

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case - owner creates a company

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[SignupResponse] (structured response)

    Business Logic:
    1. Check if email already exists
    2. Create Company
    3. Create owner User with email_verified=False
    4. Link company.owner_id to the new user
    5. Issue a 24h email verification token
    6. Commit transaction atomically
    7. Send verification email (failure is logged, signup still succeeds)
    8. Return user, company and credential pair
    """

    def __init__(self, uow: UnitOfWork, notifier: INotificationService):
        self.uow = uow
        self.notifier = notifier

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("USER_ALREADY_EXISTS", "User with this email already exists")
                )

            password_hash = await hash_password(command.password)

            company = await self.uow.companies.create(Company(name=command.company_name))

            try:
                user = await self.uow.users.create(
                    User(
                        email=command.email,
                        password_hash=password_hash,
                        first_name=command.first_name,
                        last_name=command.last_name,
                        phone=command.phone,
                        role=UserRole.owner,
                        company_id=company.id,
                        email_verified=False,
                    )
                )
            except DuplicateKeyError:
                return Return.err(
                    Error("USER_ALREADY_EXISTS", "User with this email already exists")
                )

            company.owner_id = user.id
            await self.uow.companies.update(company)

            verification = await TokenIssuer(self.uow).issue(
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

        logger.info(f"New company created: {company.name} by {user.email}")

        return Return.ok(
            SignupResponse(
                user=UserInfo.from_user(user),
                company=CompanyInfo.from_company(company),
                tokens=generate_token_pair(user),
            )
        )
