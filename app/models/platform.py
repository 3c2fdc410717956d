"""ORM model for gaming platforms (seed data, read-only to the API)."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class Platform(Base):
    __tablename__ = "VideoGame_Platform"

    id = Column("PlatformID", Integer, primary_key=True, autoincrement=True)
    name = Column("Platform", String(100), nullable=False, unique=True, index=True)
