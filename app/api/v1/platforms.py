"""Platforms endpoint: names available for the inventory Platform field."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.inventory import list_platforms

router = APIRouter()


@router.get("", response_model=list[str])
def get_platforms(db: Annotated[Session, Depends(get_db)]) -> list[str]:
    """Return all platform names sorted alphabetically."""
    return list_platforms(db)
