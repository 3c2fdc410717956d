"""Request schemas for self-service profile updates."""

from pydantic import BaseModel, Field, field_validator

from app.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN


class ProfileUpdateRequest(BaseModel):
    """Username and/or password change for the caller's own account.

    Empty strings are treated as "not supplied". The username is trimmed
    first, so one made only of spaces changes nothing.
    """

    model_config = {"populate_by_name": True}

    user_id: int = Field(..., alias="userId")
    username: str | None = Field(default=None, max_length=USERNAME_MAX_LEN)
    password: str | None = Field(default=None, max_length=PASSWORD_MAX_LEN)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()
