"""Authorization policy: role gate for inventory and uploads, ownership gate for profiles."""

import logging

from app.models.user import UserRole
from app.schemas.auth import CurrentUser
from app.services.errors import AuthorizationError

logger = logging.getLogger(__name__)


def authorize(identity: CurrentUser, required_role: UserRole) -> bool:
    return identity.role == required_role


def can_modify_own_profile(identity: CurrentUser, target_user_id: int) -> bool:
    """A user may always edit their own profile and never anyone else's, whatever the role."""
    return identity.id == target_user_id


def require_role(identity: CurrentUser, required_role: UserRole) -> None:
    if not authorize(identity, required_role):
        logger.warning(
            "Forbidden: role check failed",
            extra={"user_id": identity.id, "required_role": int(required_role)},
        )
        raise AuthorizationError(f"{required_role.name.title()} access required")


def require_self(identity: CurrentUser, target_user_id: int) -> None:
    if not can_modify_own_profile(identity, target_user_id):
        logger.warning(
            "Forbidden: profile update for another user",
            extra={"user_id": identity.id, "target_user_id": target_user_id},
        )
        raise AuthorizationError("You can only update your own profile")
