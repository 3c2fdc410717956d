"""Cookie-based login, logout, registration and auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from app.api.v1.errors import to_http_exception
from app.core.config import settings
from app.core.database import get_db
from app.core.security import create_access_token
from app.models.user import UserRole
from app.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    SuccessResponse,
)
from app.services.authorization import authorize
from app.services.errors import AuthenticationError, ConflictError
from app.services.session import require_identity
from app.services.users import authenticate_user, register_user

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with username and password.

    On success the signed token is set as an HttpOnly, SameSite=Strict cookie
    valid for JWT_EXPIRE_MINUTES; the body carries the identity only.
    """
    user = authenticate_user(db, body.username, body.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    identity = CurrentUser.model_validate(user)
    token = create_access_token(identity.id, identity.username, identity.role)
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
        max_age=settings.JWT_EXPIRE_MINUTES * 60,
    )
    return LoginResponse(user=identity)


@router.post("/logout", response_model=SuccessResponse)
def logout(response: Response) -> SuccessResponse:
    """Delete the session cookie. The token itself stays valid until it expires."""
    response.delete_cookie(
        key=settings.AUTH_COOKIE_NAME,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )
    return SuccessResponse()


@router.post("/register", response_model=SuccessResponse)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> SuccessResponse:
    """Create a staff account. Admin accounts are created with the create_user script."""
    try:
        register_user(db, body.username, body.password)
    except ConflictError as e:
        raise to_http_exception(e) from e
    return SuccessResponse()


def get_current_user(request: Request) -> CurrentUser:
    """Dependency: require a valid session cookie and return its identity. Raises 401 otherwise."""
    try:
        return require_identity(request.cookies)
    except AuthenticationError as e:
        raise to_http_exception(e) from e


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require an authenticated admin. Raises 403 for staff."""
    if not authorize(current_user, UserRole.ADMIN):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


@router.get("/user", response_model=CurrentUser)
def get_user(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Return the identity carried by the session cookie."""
    return current_user
