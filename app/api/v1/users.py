"""Self-service profile endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.api.v1.errors import to_http_exception
from app.core.database import get_db
from app.schemas.auth import CurrentUser, SuccessResponse
from app.schemas.user import ProfileUpdateRequest
from app.services.errors import ServiceError
from app.services.users import update_profile

router = APIRouter()


@router.put("/update", response_model=SuccessResponse)
def put_profile(
    body: ProfileUpdateRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> SuccessResponse:
    """
    Change the caller's own username and/or password.

    userId must be the caller's id (403 otherwise). A taken username (400)
    discards the whole update. The session cookie keeps the old username until
    the user logs in again.
    """
    try:
        update_profile(
            db,
            current_user,
            body.user_id,
            username=body.username,
            password=body.password,
        )
    except ServiceError as e:
        raise to_http_exception(e) from e
    return SuccessResponse()
