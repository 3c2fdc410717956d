"""Shared fixtures for tests: in-memory SQLite database, seed rows and identities."""

from decimal import Decimal

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import hash_password
from app.models import Base, Game, Platform, User, UserRole
from app.schemas.auth import CurrentUser

PLATFORMS = ("Xbox Series X", "PS5", "Nintendo Switch")


def make_engine() -> Engine:
    """One shared in-memory connection so every session sees the same tables."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def seed_platforms(db: Session, names: tuple[str, ...] = PLATFORMS) -> dict[str, int]:
    platforms = [Platform(name=name) for name in names]
    db.add_all(platforms)
    db.commit()
    return {p.name: p.id for p in platforms}


def seed_user(
    db: Session,
    username: str = "alice",
    password: str = "pw1",
    role: UserRole = UserRole.STAFF,
) -> User:
    user = User(username=username, password_hash=hash_password(password), role=int(role))
    db.add(user)
    db.commit()
    return user


def seed_game(
    db: Session,
    platform_id: int,
    name: str = "Zelda",
    quantity: int = 3,
    genre: str = "Adventure",
    price: str = "49.99",
) -> Game:
    game = Game(
        name=name,
        price=Decimal(price),
        rating=4,
        genre=genre,
        quantity=quantity,
        platform_id=platform_id,
    )
    db.add(game)
    db.commit()
    return game


def admin_identity(user_id: int = 1, username: str = "retailer") -> CurrentUser:
    return CurrentUser(id=user_id, username=username, role=UserRole.ADMIN)


def staff_identity(user_id: int = 2, username: str = "staff") -> CurrentUser:
    return CurrentUser(id=user_id, username=username, role=UserRole.STAFF)
