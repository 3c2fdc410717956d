"""Inventory service: listing and transactional mutations of video-game rows.

Every mutation runs as begin -> resolve platform -> write -> commit, and rolls
back on any failure after the first statement. Only admins may mutate.
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from app.models import Game, Platform
from app.models.user import UserRole
from app.schemas.auth import CurrentUser
from app.schemas.inventory import INT32_MAX, GameRead, GameWrite
from app.services.authorization import require_role
from app.services.errors import NotFoundError

logger = logging.getLogger(__name__)

INVALID_PLATFORM = "Invalid platform selected"
GAME_NOT_FOUND = "Game not found"


def list_games(
    db: Session,
    platform: str | None = None,
    genre: str | None = None,
) -> list[GameRead]:
    """
    Return every game matching the optional platform name and genre, oldest first.

    No pagination; the whole matching set is returned.
    """
    stmt = select(Game, Platform.name).join(Platform, Game.platform_id == Platform.id)
    if platform:
        stmt = stmt.where(Platform.name == platform)
    if genre:
        stmt = stmt.where(Game.genre == genre)
    stmt = stmt.order_by(Game.id)
    return [
        GameRead(
            id=game.id,
            name=game.name,
            price=float(game.price),
            rating=game.rating,
            genre=game.genre,
            quantity=game.quantity,
            image_url=game.image_url,
            platform=platform_name,
        )
        for game, platform_name in db.execute(stmt).all()
    ]


def list_platforms(db: Session) -> list[str]:
    """Platform names sorted alphabetically."""
    return list(db.scalars(select(Platform.name).order_by(Platform.name)))


def resolve_platform_id(db: Session, name: str) -> int:
    """Translate a platform name to its id. Raises NotFoundError if unknown."""
    platform_id = db.scalar(select(Platform.id).where(Platform.name == name))
    if platform_id is None:
        logger.warning("Unknown platform", extra={"platform": name})
        raise NotFoundError(INVALID_PLATFORM)
    return platform_id


def add_game(db: Session, actor: CurrentUser, data: GameWrite) -> int:
    """Insert a game and return its id. Unknown platform leaves no row behind."""
    require_role(actor, UserRole.ADMIN)
    try:
        platform_id = resolve_platform_id(db, data.platform)
        game = Game(
            name=data.name,
            price=data.price,
            rating=data.rating,
            genre=data.genre,
            quantity=data.quantity,
            platform_id=platform_id,
            image_url=data.image_url,
        )
        db.add(game)
        db.flush()
        game_id = game.id
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Game added", extra={"game_id": game_id, "actor_id": actor.id})
    return game_id


def update_game(db: Session, actor: CurrentUser, game_id: int, data: GameWrite) -> None:
    """Replace every mutable field of a game. Raises NotFoundError if the id is unknown."""
    require_role(actor, UserRole.ADMIN)
    try:
        platform_id = resolve_platform_id(db, data.platform)
        game = db.get(Game, game_id)
        if game is None:
            raise NotFoundError(GAME_NOT_FOUND)
        game.name = data.name
        game.price = data.price
        game.rating = data.rating
        game.genre = data.genre
        game.quantity = data.quantity
        game.platform_id = platform_id
        game.image_url = data.image_url
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Game updated", extra={"game_id": game_id, "actor_id": actor.id})


def delete_game(db: Session, actor: CurrentUser, game_id: int) -> None:
    """Delete a game with a single statement. Raises NotFoundError if nothing matched."""
    require_role(actor, UserRole.ADMIN)
    try:
        result = db.execute(delete(Game).where(Game.id == game_id))
        if result.rowcount == 0:
            raise NotFoundError(GAME_NOT_FOUND)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Game deleted", extra={"game_id": game_id, "actor_id": actor.id})


def adjust_quantity(db: Session, actor: CurrentUser, game_id: int, delta: int) -> int:
    """
    Add delta to a game's quantity, clamped to 0..INT32_MAX, and return the new quantity.

    The row is read FOR UPDATE so concurrent adjustments of the same game
    serialize instead of overwriting each other.
    """
    require_role(actor, UserRole.ADMIN)
    try:
        current = db.scalar(
            select(Game.quantity).where(Game.id == game_id).with_for_update()
        )
        if current is None:
            raise NotFoundError(GAME_NOT_FOUND)
        new_quantity = min(INT32_MAX, max(0, current + delta))
        db.execute(
            update(Game).where(Game.id == game_id).values(quantity=new_quantity)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(
        "Quantity adjusted",
        extra={
            "game_id": game_id,
            "actor_id": actor.id,
            "delta": delta,
            "new_quantity": new_quantity,
        },
    )
    return new_quantity
