"""Initial users, platforms and video-game inventory tables.

Revision ID: 20250301000000
Revises:
Create Date: 2025-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20250301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "UserTable",
        sa.Column("UserID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("UserName", sa.String(length=255), nullable=False),
        sa.Column("Password", sa.String(length=255), nullable=False),
        sa.Column("UserType", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("UserID", name=op.f("pk_UserTable")),
    )
    op.create_index(
        op.f("ix_UserTable_UserName"),
        "UserTable",
        ["UserName"],
        unique=True,
    )

    op.create_table(
        "VideoGame_Platform",
        sa.Column("PlatformID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("Platform", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("PlatformID", name=op.f("pk_VideoGame_Platform")),
    )
    op.create_index(
        op.f("ix_VideoGame_Platform_Platform"),
        "VideoGame_Platform",
        ["Platform"],
        unique=True,
    )

    op.create_table(
        "VideoGame",
        sa.Column("GameID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("GameName", sa.String(length=255), nullable=False),
        sa.Column("Price", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("Rating", sa.Integer(), nullable=False),
        sa.Column("Genre", sa.String(length=64), nullable=False),
        sa.Column("Quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("PlatformID", sa.Integer(), nullable=False),
        sa.Column("ImageUrl", sa.String(length=1024), nullable=True),
        sa.ForeignKeyConstraint(
            ["PlatformID"],
            ["VideoGame_Platform.PlatformID"],
            name=op.f("fk_VideoGame_PlatformID_VideoGame_Platform"),
        ),
        sa.PrimaryKeyConstraint("GameID", name=op.f("pk_VideoGame")),
        sa.CheckConstraint('"Quantity" >= 0', name="ck_VideoGame_quantity_non_negative"),
        sa.CheckConstraint('"Rating" BETWEEN 1 AND 5', name="ck_VideoGame_rating_range"),
    )
    op.create_index(op.f("ix_VideoGame_Genre"), "VideoGame", ["Genre"], unique=False)
    op.create_index(
        op.f("ix_VideoGame_PlatformID"), "VideoGame", ["PlatformID"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_VideoGame_PlatformID"), table_name="VideoGame")
    op.drop_index(op.f("ix_VideoGame_Genre"), table_name="VideoGame")
    op.drop_table("VideoGame")
    op.drop_index(op.f("ix_VideoGame_Platform_Platform"), table_name="VideoGame_Platform")
    op.drop_table("VideoGame_Platform")
    op.drop_index(op.f("ix_UserTable_UserName"), table_name="UserTable")
    op.drop_table("UserTable")
