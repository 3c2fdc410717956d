"""Session guard: turn the bearer cookie into an authenticated identity.

Verification is signature + expiry only. Storage is never consulted, so a
user whose row changed keeps the identity in their token until it expires.
"""

import logging
from collections.abc import Mapping
from typing import Any

import jwt

from app.core.config import settings
from app.core.security import decode_access_token
from app.models.user import UserRole
from app.schemas.auth import CurrentUser
from app.services.errors import AuthenticationError

logger = logging.getLogger(__name__)


def _identity_from_payload(payload: dict[str, Any]) -> CurrentUser | None:
    try:
        user_id = int(payload["sub"])
        role = UserRole(payload["role"])
    except (KeyError, TypeError, ValueError):
        return None
    username = payload.get("username")
    if not isinstance(username, str) or not username:
        return None
    return CurrentUser(id=user_id, username=username, role=role)


def verify_token(token: str) -> CurrentUser | None:
    """Return the identity in a valid token, or None. Never raises."""
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        logger.info("Rejected session token: %s", type(e).__name__)
        return None
    identity = _identity_from_payload(payload)
    if identity is None:
        logger.info("Rejected session token: malformed identity claims")
    return identity


def authenticate_request(cookies: Mapping[str, str]) -> CurrentUser | None:
    """Read the session cookie and verify it; None means unauthenticated."""
    token = cookies.get(settings.AUTH_COOKIE_NAME)
    if not token:
        return None
    return verify_token(token)


def require_identity(cookies: Mapping[str, str]) -> CurrentUser:
    """Like authenticate_request, but raises AuthenticationError instead of returning None."""
    identity = authenticate_request(cookies)
    if identity is None:
        if cookies.get(settings.AUTH_COOKIE_NAME):
            raise AuthenticationError("Invalid token")
        raise AuthenticationError("Not authenticated")
    return identity
