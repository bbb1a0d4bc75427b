"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from core.schemas import CamelModel


# bcrypt only reads the first 72 bytes, and bcrypt>=5 refuses anything longer.
BCRYPT_MAX_PASSWORD_BYTES = 72


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=BCRYPT_MAX_PASSWORD_BYTES)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
        return value


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class UserSummary(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str


class RegisteredUser(UserSummary):
    created_at: datetime | None = None


class UserResponse(RegisteredUser):
    """
    Everything stored for a user except the password hash.
    """

    is_active: bool | None = None
    updated_at: datetime | None = None
