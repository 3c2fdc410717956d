"""ORM model for application users (auth and role-based access control)."""

from enum import IntEnum

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class UserRole(IntEnum):
    """Closed set of roles; persisted as the integer in UserTable.UserType."""

    STAFF = 0
    ADMIN = 1


class User(Base):
    """
    User account for cookie-carried JWT sessions.

    role: UserRole.STAFF (warehouse staff) or UserRole.ADMIN (retailer).
    Only the password hash is stored, never the plain password.
    """

    __tablename__ = "UserTable"

    id = Column("UserID", Integer, primary_key=True, autoincrement=True)
    username = Column("UserName", String(255), nullable=False, unique=True, index=True)
    password_hash = Column("Password", String(255), nullable=False)
    role = Column("UserType", Integer, nullable=False, default=int(UserRole.STAFF))
