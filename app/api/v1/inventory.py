"""Inventory endpoints: public listing, admin-only add/replace/delete/quantity adjustment."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.api.v1.errors import to_http_exception
from app.core.database import get_db
from app.schemas.auth import CurrentUser, SuccessResponse
from app.schemas.inventory import (
    INT32_MAX,
    GameCreatedResponse,
    GameRead,
    GameWrite,
    QuantityAdjustRequest,
    QuantityAdjustResponse,
)
from app.services import inventory
from app.services.errors import ServiceError

router = APIRouter()

GameId = Annotated[int, Path(ge=1, le=INT32_MAX)]


@router.get("", response_model=list[GameRead])
def get_inventory(
    db: Annotated[Session, Depends(get_db)],
    platform: str | None = None,
    genre: str | None = None,
) -> list[GameRead]:
    """
    List games, optionally filtered by exact platform name and/or genre.

    Open to unauthenticated callers. Price is returned as a number.
    """
    return inventory.list_games(db, platform=platform, genre=genre)


@router.post("", response_model=GameCreatedResponse)
def post_game(
    body: GameWrite,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_admin)],
) -> GameCreatedResponse:
    """Add a game. The Platform name must match an existing platform."""
    try:
        game_id = inventory.add_game(db, admin, body)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return GameCreatedResponse(game_id=game_id)


@router.put("/{game_id}", response_model=SuccessResponse)
def put_game(
    game_id: GameId,
    body: GameWrite,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_admin)],
) -> SuccessResponse:
    """Replace all mutable fields of a game."""
    try:
        inventory.update_game(db, admin, game_id, body)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return SuccessResponse()


@router.delete("/{game_id}", response_model=SuccessResponse)
def delete_game(
    game_id: GameId,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_admin)],
) -> SuccessResponse:
    try:
        inventory.delete_game(db, admin, game_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return SuccessResponse()


@router.put("/{game_id}/quantity", response_model=QuantityAdjustResponse)
def put_quantity(
    game_id: GameId,
    body: QuantityAdjustRequest,
    db: Annotated[Session, Depends(get_db)],
    admin: Annotated[CurrentUser, Depends(require_admin)],
) -> QuantityAdjustResponse:
    """Apply a signed adjustment to the stock count; the result never drops below zero."""
    try:
        new_quantity = inventory.adjust_quantity(db, admin, game_id, body.adjustment)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return QuantityAdjustResponse(new_quantity=new_quantity)
