"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field, field_validator

from app.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN
from app.models.user import UserRole


def normalize_username(v: str) -> str:
    """Trim surrounding whitespace; a username of only spaces is rejected."""
    s = v.strip()
    if not s:
        raise ValueError("username must be non-empty")
    return s


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LEN, description="Username")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return normalize_username(v)


class RegisterRequest(BaseModel):
    """New account credentials. Registered users always start as staff."""

    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LEN, description="Username")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return normalize_username(v)


class CurrentUser(BaseModel):
    """Authenticated identity (id, username, role) carried by the session token."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    role: UserRole = Field(..., serialization_alias="userType")


class LoginResponse(BaseModel):
    """Response after a successful login; the token itself travels in the cookie."""

    message: str = "Login successful"
    user: CurrentUser


class SuccessResponse(BaseModel):
    success: bool = True
