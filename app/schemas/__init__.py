"""Pydantic request/response schemas."""

from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    SuccessResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.inventory import (
    GameCreatedResponse,
    GameRead,
    GameWrite,
    GenreName,
    QuantityAdjustRequest,
    QuantityAdjustResponse,
)
from app.schemas.upload import UploadResponse
from app.schemas.user import ProfileUpdateRequest

__all__ = [
    "CurrentUser",
    "GameCreatedResponse",
    "GameRead",
    "GameWrite",
    "GenreName",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "ProfileUpdateRequest",
    "QuantityAdjustRequest",
    "QuantityAdjustResponse",
    "RegisterRequest",
    "SuccessResponse",
    "UploadResponse",
]
