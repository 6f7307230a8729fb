import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from src.api.error import ClientError, ServerError, invite_error
from src.api.utils.validators import NewPasswordMixin, check_password_strength
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ConfirmPasswordResetUseCase,
    CurrentUserResponse,
    LoadCurrentUserUseCase,
    LoginResponse,
    LoginUseCase,
    MessageResponse,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    RequestPasswordResetUseCase,
    ResendVerificationUseCase,
    SignupCommand,
    SignupResponse,
    SignupUseCase,
    VerifyEmailUseCase,
)
from src.app.use_cases.invitations import (
    AcceptInviteCommand,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    InviteUserCommand,
    InviteUserResponse,
    InviteUserUseCase,
)
from src.depends import get_current_user, get_notification_service, get_unit_of_work

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    email: EmailStr = Field(..., description="Owner email address")
    password: str = Field(..., description="Owner password")
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    company_name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)

    @field_validator("password")
    @classmethod
    def _password_strength(cls, value: str) -> str:
        return check_password_strength(value)


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse
)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Company Signup

    Command/Response Flow:
    1. SignupRequest validates HTTP input
    2. Map to SignupCommand (business intent)
    3. Execute SignupUseCase
    4. Map SignupResponse to HTTP response

    Creates the company, its owner account and sends a verification email.

    Raises:
        - 400 Bad Request: Invalid input
        - 409 Conflict: Email already exists
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        company_name=request.company_name,
        phone=request.phone,
    )

    use_case = SignupUseCase(uow, notifier)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "USER_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Authenticates user and returns the access/refresh credential pair.

    Raises:
        - 401 Unauthorized: Invalid credentials or deactivated account
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_CREDENTIALS", "ACCOUNT_DEACTIVATED"):
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., description="Refresh token")


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=RefreshTokenResponse)
async def refresh(request: RefreshRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Refresh Credentials

    Exchanges a refresh token for a new credential pair.

    Raises:
        - 401 Unauthorized: Invalid or expired refresh token
        - 500 Internal Server Error: Server error
    """
    use_case = RefreshTokenUseCase(uow)
    result = await use_case.execute(request.refresh_token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")


@router.post(
    "/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Request Password Reset

    Always answers with the same message so account existence is not revealed.
    """
    use_case = RequestPasswordResetUseCase(uow, notifier)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ResetPasswordRequest(NewPasswordMixin):
    token: str = Field(..., min_length=1, description="Password reset token")


@router.post(
    "/reset-password", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def reset_password(
    request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Confirm Password Reset

    Raises:
        - 400 Bad Request: Invalid, expired or used token; weak or mismatched password
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmPasswordResetUseCase(uow)
    result = await use_case.execute(request.token, request.password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_OR_EXPIRED_TOKEN", "USER_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class VerifyEmailRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Email verification token")


@router.post("/verify-email", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def verify_email(request: VerifyEmailRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Email Verification

    Raises:
        - 400 Bad Request: Invalid, expired or used token
        - 500 Internal Server Error: Server error
    """
    use_case = VerifyEmailUseCase(uow)
    result = await use_case.execute(request.token)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_OR_EXPIRED_TOKEN", "USER_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post(
    "/resend-verification", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def resend_verification(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Resend Verification Email

    Raises:
        - 400 Bad Request: Email already verified
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: User no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = ResendVerificationUseCase(uow, notifier)
    result = await use_case.execute(UUID(current_user["sub"]))

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_VERIFIED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(current_user: dict = Depends(get_current_user)):
    """
    Logout

    Credentials are stateless; the client discards its token pair.
    """
    logger.info(f"User logged out: {current_user.get('email')}")
    return MessageResponse(status="success", message="Logout successful")


@router.get("/me", status_code=status.HTTP_200_OK, response_model=CurrentUserResponse)
async def me(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User

    Raises:
        - 401 Unauthorized: Invalid JWT or deactivated account
        - 404 Not Found: User or company no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = LoadCurrentUserUseCase(uow)
    result = await use_case.execute(UUID(current_user["sub"]))

    if result.is_err():
        error = result.error
        if error.code == "ACCOUNT_DEACTIVATED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code in ("USER_NOT_FOUND", "COMPANY_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class InviteUserRequest(BaseModel):
    """
    Invite user HTTP request payload

    The invitee fills in their own password when accepting.
    """

    email: EmailStr = Field(..., description="Email address to invite")
    role: str = Field(..., description="Role granted on acceptance")
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    department: Optional[str] = Field(None, max_length=100)


@router.post(
    "/invite", status_code=status.HTTP_201_CREATED, response_model=InviteUserResponse
)
async def invite_user(
    request: InviteUserRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Invite User

    Issues a 7-day invite token and emails the accept link.
    Only owner/admin can invite.

    Raises:
        - 400 Bad Request: Invalid role
        - 401 Unauthorized: Invalid JWT or inviter no longer exists
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 409 Conflict: USER_ALREADY_EXISTS
        - 500 Internal Server Error: INVITE_DISPATCH_FAILED (invite was withdrawn)
    """
    command = InviteUserCommand(
        email=request.email,
        role=request.role,
        first_name=request.first_name,
        last_name=request.last_name,
        department=request.department,
    )

    use_case = InviteUserUseCase(uow, notifier)
    result = await use_case.execute(UUID(current_user["sub"]), command)

    if result.is_err():
        raise invite_error(result.error)

    return result.value


class AcceptInviteRequest(NewPasswordMixin):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)


@router.post(
    "/accept-invite/{token}",
    status_code=status.HTTP_201_CREATED,
    response_model=AcceptInviteResponse,
)
async def accept_invite(
    token: str,
    request: AcceptInviteRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationService = Depends(get_notification_service),
):
    """
    Accept Invite

    Creates the invited account (and, for employee invites, the Employee
    record) and returns a credential pair. The token is single-use.

    Raises:
        - 400 Bad Request: INVALID_OR_EXPIRED_TOKEN, weak or mismatched password
        - 409 Conflict: USER_ALREADY_EXISTS, EMPLOYEE_ALREADY_EXISTS
        - 500 Internal Server Error: Server error
    """
    command = AcceptInviteCommand(
        token=token,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
    )

    use_case = AcceptInviteUseCase(uow, notifier)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_OR_EXPIRED_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code in ("USER_ALREADY_EXISTS", "EMPLOYEE_ALREADY_EXISTS"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value

