from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CompanyInfo, CurrentUserResponse, UserInfo


class LoadCurrentUserUseCase:
    """Loads the authenticated user and their company from the access token subject"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[CurrentUserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not user.is_active:
                return Return.err(Error("ACCOUNT_DEACTIVATED", "Account is deactivated"))

            company = await self.uow.companies.get_by_id(user.company_id)
            if company is None:
                return Return.err(Error("COMPANY_NOT_FOUND", "Company not found"))

            response = CurrentUserResponse(
                user=UserInfo.from_user(user),
                company=CompanyInfo.from_company(company),
                last_login_at=user.last_login_at.isoformat() if user.last_login_at else None,
            )

        return Return.ok(response)
