"""Pydantic schemas for inventory games and platforms.

Field aliases keep the JSON contract used by the inventory front end
(GameName, Price, Platform, ...) while the Python side uses snake_case.
"""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator

# Extend this Literal to add a genre; it is the only place genres are listed.
GenreName = Literal["Adventure", "FPS", "Fighting"]

RATING_MIN = 1
RATING_MAX = 5

# Quantity and ids are 32-bit INTEGER columns.
INT32_MAX = 2**31 - 1


class GameWrite(BaseModel):
    """Full set of mutable game fields for create and replace."""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    name: str = Field(..., alias="GameName", min_length=1, max_length=255)
    price: Decimal = Field(..., alias="Price", ge=0, max_digits=10, decimal_places=2)
    rating: int = Field(..., alias="Rating", ge=RATING_MIN, le=RATING_MAX)
    genre: GenreName = Field(..., alias="Genre")
    quantity: int = Field(..., alias="Quantity", ge=0, le=INT32_MAX)
    platform: str = Field(..., alias="Platform", min_length=1, max_length=100)
    image_url: str | None = Field(default=None, alias="ImageUrl", max_length=1024)

    @field_validator("name", "platform")
    @classmethod
    def strip_required(cls, v: str) -> str:
        s = v.strip()
        if not s:
            raise ValueError("must be non-empty")
        return s

    @field_validator("image_url")
    @classmethod
    def empty_image_url_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class GameRead(BaseModel):
    """One inventory row as returned by GET /inventory. Price is a JSON number."""

    model_config = {"populate_by_name": True}

    id: int = Field(..., serialization_alias="GameID")
    name: str = Field(..., serialization_alias="GameName")
    price: float = Field(..., serialization_alias="Price")
    rating: int = Field(..., serialization_alias="Rating")
    genre: str = Field(..., serialization_alias="Genre")
    quantity: int = Field(..., serialization_alias="Quantity")
    image_url: str | None = Field(default=None, serialization_alias="ImageUrl")
    platform: str = Field(..., serialization_alias="Platform")


class GameCreatedResponse(BaseModel):
    success: bool = True
    game_id: int = Field(..., serialization_alias="gameId")


class QuantityAdjustRequest(BaseModel):
    """Signed delta applied to a game's stock; the result is clamped to 0..INT32_MAX."""

    adjustment: int = Field(..., ge=-INT32_MAX, le=INT32_MAX)


class QuantityAdjustResponse(BaseModel):
    success: bool = True
    new_quantity: int = Field(..., ge=0, serialization_alias="newQuantity")
