"""User service: registration, credential checks and self-service profile updates."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import hash_password, verify_password
from app.models.user import User, UserRole
from app.schemas.auth import CurrentUser
from app.services.authorization import require_self
from app.services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "Username is already taken"


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def register_user(db: Session, username: str, password: str) -> User:
    """
    Create a staff account. Raises ConflictError if the username exists.

    The pre-check is not transactional; a concurrent registration of the same
    name is caught by the unique index and reported the same way.
    """
    if get_user_by_username(db, username) is not None:
        raise ConflictError(USERNAME_TAKEN)
    user = User(
        username=username,
        password_hash=hash_password(password),
        role=int(UserRole.STAFF),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(USERNAME_TAKEN) from e
    logger.info("Registered user", extra={"user_id": user.id})
    return user


def authenticate_user(db: Session, username: str, password: str) -> User | None:
    """Return the user when username and password match, else None."""
    user = get_user_by_username(db, username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed", extra={"username": username})
        return None
    return user


def update_profile(
    db: Session,
    actor: CurrentUser,
    target_user_id: int,
    username: str | None = None,
    password: str | None = None,
) -> None:
    """
    Change the caller's own username and/or password in one transaction.

    A username collision rolls back the whole call, including a password
    change submitted alongside it.
    """
    require_self(actor, target_user_id)
    try:
        user = db.get(User, target_user_id)
        if user is None:
            raise NotFoundError("User not found")
        if username:
            taken = (
                db.query(User.id)
                .filter(User.username == username, User.id != target_user_id)
                .first()
            )
            if taken is not None:
                raise ConflictError(USERNAME_TAKEN)
            user.username = username
        if password:
            user.password_hash = hash_password(password)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(USERNAME_TAKEN) from e
    except Exception:
        db.rollback()
        raise
    logger.info(
        "Profile updated",
        extra={
            "user_id": target_user_id,
            "username_changed": bool(username),
            "password_changed": bool(password),
        },
    )
