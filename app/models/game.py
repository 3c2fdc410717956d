"""ORM model for video-game inventory rows."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from app.models.base import Base


class Game(Base):
    """
    One inventory record. The platform is stored as a foreign key and exposed
    by name through the relationship.

    quantity is never written below zero; rating is 1-5.
    """

    __tablename__ = "VideoGame"
    __table_args__ = (
        CheckConstraint('"Quantity" >= 0', name="ck_VideoGame_quantity_non_negative"),
        CheckConstraint('"Rating" BETWEEN 1 AND 5', name="ck_VideoGame_rating_range"),
    )

    id = Column("GameID", Integer, primary_key=True, autoincrement=True)
    name = Column("GameName", String(255), nullable=False)
    price = Column("Price", Numeric(10, 2), nullable=False)
    rating = Column("Rating", Integer, nullable=False)
    genre = Column("Genre", String(64), nullable=False, index=True)
    quantity = Column("Quantity", Integer, nullable=False, default=0)
    platform_id = Column(
        "PlatformID",
        Integer,
        ForeignKey("VideoGame_Platform.PlatformID"),
        nullable=False,
        index=True,
    )
    image_url = Column("ImageUrl", String(1024), nullable=True)

    platform = relationship("Platform")
