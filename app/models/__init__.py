"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.game import Game
from app.models.platform import Platform
from app.models.user import User, UserRole

__all__ = ["Base", "Game", "Platform", "User", "UserRole"]
