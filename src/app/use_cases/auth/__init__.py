"""
Authentication Use Cases

All authentication-related business logic.
"""

from .signup_use_case import SignupUseCase
from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .resend_verification_use_case import ResendVerificationUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .load_current_user_use_case import LoadCurrentUserUseCase
from .dtos import (
    CompanyInfo,
    CurrentUserResponse,
    LoginResponse,
    MessageResponse,
    RefreshTokenResponse,
    SignupCommand,
    SignupResponse,
    UserInfo,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "VerifyEmailUseCase",
    "ResendVerificationUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "LoadCurrentUserUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "SignupResponse",
    "LoginResponse",
    "RefreshTokenResponse",
    "CurrentUserResponse",
    "MessageResponse",
    # DTOs - Nested Models
    "UserInfo",
    "CompanyInfo",
]
