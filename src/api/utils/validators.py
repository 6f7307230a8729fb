"""
Request validation helpers shared by the API routes.
"""

import re

from pydantic import BaseModel, Field, field_validator, model_validator

PASSWORD_SPECIALS = "@$!%*?&"
_PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$"
)


def check_password_strength(password: str) -> str:
    if len(password) < 8:
        raise ValueError("Password must be at least 8 characters")
    if not _PASSWORD_PATTERN.match(password):
        raise ValueError(
            "Password must contain at least one uppercase letter, one lowercase letter, "
            f"one number, and one special character ({PASSWORD_SPECIALS})"
        )
    return password


class NewPasswordMixin(BaseModel):
    """
    Password + confirmation pair with the password policy applied.

    Subclasses get both fields and a mismatch check.
    """

    password: str = Field(..., description="New password")
    confirm_password: str = Field(..., description="Must match password")

    @field_validator("password")
    @classmethod
    def _password_strength(cls, value: str) -> str:
        return check_password_strength(value)

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self
