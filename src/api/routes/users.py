from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    ChangeRoleUseCase,
    SetUserActiveUseCase,
    UserStatusResponse,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/users", tags=["Users"])


def _parse_user_id(user_id: str) -> UUID:
    try:
        return UUID(user_id)
    except ValueError:
        raise ClientError(
            Error("INVALID_USER_ID", "Invalid user ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _user_error(error: Error) -> Exception:
    if error.code in (
        "INVALID_ROLE",
        "CANNOT_CHANGE_OWNER",
        "CANNOT_DEACTIVATE_OWNER",
        "CANNOT_DEACTIVATE_SELF",
    ):
        return ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "USER_NOT_FOUND":
        return ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    elif error.code == "INSUFFICIENT_ROLE":
        return ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code == "TARGET_USER_NOT_FOUND":
        return ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    return ServerError(error)


class ChangeRoleRequest(BaseModel):
    """
    Change role HTTP request payload
    """

    role: str = Field(..., description="New role (any role except owner)")


@router.patch(
    "/{user_id}/role",
    status_code=status.HTTP_200_OK,
    response_model=UserStatusResponse,
)
async def change_user_role(
    user_id: str,
    request: ChangeRoleRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change User Role

    Requires owner permissions.

    Raises:
        - 400 Bad Request: INVALID_USER_ID, INVALID_ROLE, CANNOT_CHANGE_OWNER
        - 401 Unauthorized: Invalid JWT or caller no longer exists
        - 403 Forbidden: INSUFFICIENT_ROLE (non-owner)
        - 404 Not Found: TARGET_USER_NOT_FOUND
    """
    target_user_id = _parse_user_id(user_id)

    use_case = ChangeRoleUseCase(uow)
    result = await use_case.execute(UUID(current_user["sub"]), target_user_id, request.role)

    if result.is_err():
        raise _user_error(result.error)

    return result.value


@router.patch(
    "/{user_id}/deactivate",
    status_code=status.HTTP_200_OK,
    response_model=UserStatusResponse,
)
async def deactivate_user(
    user_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Deactivate User

    Requires owner or admin permissions. The owner and the caller
    themselves cannot be deactivated.
    """
    target_user_id = _parse_user_id(user_id)

    use_case = SetUserActiveUseCase(uow)
    result = await use_case.execute(UUID(current_user["sub"]), target_user_id, active=False)

    if result.is_err():
        raise _user_error(result.error)

    return result.value


@router.patch(
    "/{user_id}/activate",
    status_code=status.HTTP_200_OK,
    response_model=UserStatusResponse,
)
async def activate_user(
    user_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Reactivate User - requires owner or admin permissions"""
    target_user_id = _parse_user_id(user_id)

    use_case = SetUserActiveUseCase(uow)
    result = await use_case.execute(UUID(current_user["sub"]), target_user_id, active=True)

    if result.is_err():
        raise _user_error(result.error)

    return result.value
