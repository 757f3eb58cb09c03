"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.security import (
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_BYTES,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)

# Same basic address shape the sign-up form accepts: something@something.tld
EMAIL_PATTERN = r"^\S+@\S+\.\S+$"


def _normalize_email(v: str) -> str:
    return v.strip().lower()


class SignUpRequest(BaseModel):
    """Payload for account creation."""

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN, description="Display name")
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, description="Unique email address")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )
    country: str = Field(..., min_length=1, max_length=100, description="Country")

    @field_validator("name", "country", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes (UTF-8)")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> object:
        return _normalize_email(v) if isinstance(v, str) else v


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=255, description="Email address")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> object:
        return _normalize_email(v) if isinstance(v, str) else v


class UserSummary(BaseModel):
    """Public subset of a user returned with a token."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    country: str


class CurrentUser(UserSummary):
    """Authenticated user resolved from a bearer token (full record, no password hash)."""

    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Response for sign-up and login: token plus user summary."""

    success: bool = True
    message: str | None = None
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    data: UserSummary
