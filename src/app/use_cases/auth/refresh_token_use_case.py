"""
Refresh Token Use Case

Exchanges a refresh credential for a new credential pair.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_token_pair, verify_refresh_token
from src.app.services.unit_of_work import UnitOfWork
from .dtos import RefreshTokenResponse


class RefreshTokenUseCase:
    """
    Use case for refreshing JWT access tokens.

    Business Rules:
    - Refresh token must verify against the refresh signing key
    - User must still exist and be active
    - No server-side session state: a new pair is simply minted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        claims = verify_refresh_token(refresh_token)
        if claims is None:
            return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))

        try:
            user_id = UUID(claims["sub"])
        except (KeyError, ValueError):
            return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or not user.is_active:
                return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))

            tokens = generate_token_pair(user)

        return Return.ok(RefreshTokenResponse(tokens=tokens))
