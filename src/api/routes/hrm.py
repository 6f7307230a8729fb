from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError, invite_error
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.hrm import (
    InviteEmployeeCommand,
    InviteEmployeeResponse,
    InviteEmployeeUseCase,
    ListPendingEmployeeInvitationsUseCase,
    PendingEmployeeInvitationsResponse,
)
from src.depends import get_current_user, get_notification_service, get_unit_of_work
from src.domain.entities import Address, EmergencyContact

router = APIRouter(prefix="/hrm", tags=["HRM"])


class CreateEmployeeRequest(BaseModel):
    """
    Create employee HTTP request payload

    Sends an invitation; the employee record appears once it is accepted.
    """

    employee_id: str = Field(..., min_length=1, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    department: str = Field(..., min_length=1, max_length=100)
    position: str = Field(..., min_length=1, max_length=100)
    hire_date: date
    salary: Optional[float] = Field(None, ge=0)
    manager_id: Optional[UUID] = None
    address: Optional[Address] = None
    emergency_contact: Optional[EmergencyContact] = None


@router.post(
    "/employees",
    status_code=status.HTTP_201_CREATED,
    response_model=InviteEmployeeResponse,
)
async def create_employee(
    request: CreateEmployeeRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Invite Employee

    Only owner/admin/hr_manager can invite employees.

    Raises:
        - 400 Bad Request: Invalid input
        - 401 Unauthorized: Invalid JWT or inviter no longer exists
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 409 Conflict: USER_ALREADY_EXISTS, EMPLOYEE_ALREADY_EXISTS
        - 500 Internal Server Error: INVITE_DISPATCH_FAILED (invite was withdrawn)
    """
    command = InviteEmployeeCommand(**request.model_dump())

    use_case = InviteEmployeeUseCase(uow, notifier)
    result = await use_case.execute(UUID(current_user["sub"]), command)

    if result.is_err():
        raise invite_error(result.error)

    return result.value


@router.get(
    "/employees/invitations/pending",
    status_code=status.HTTP_200_OK,
    response_model=PendingEmployeeInvitationsResponse,
)
async def list_employee_invitations(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Pending Employee Invitations

    Raises:
        - 401 Unauthorized: Invalid JWT or user no longer exists
        - 403 Forbidden: INSUFFICIENT_ROLE
    """
    use_case = ListPendingEmployeeInvitationsUseCase(uow)
    result = await use_case.execute(UUID(current_user["sub"]))

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "INSUFFICIENT_ROLE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value
