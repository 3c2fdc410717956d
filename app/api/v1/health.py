"""Health endpoint for load balancers: 200 when the store can serve and accept stock, 503 otherwise."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse
from app.services.uploads import upload_dir_writable

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    response: Response,
    db: Annotated[Session, Depends(get_db)],
) -> HealthResponse:
    database = "connected" if check_db_connected(db) else "disconnected"
    uploads = "writable" if upload_dir_writable(settings.UPLOAD_DIR) else "unavailable"
    healthy = database == "connected" and uploads == "writable"
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(
        status="ok" if healthy else "degraded",
        environment=settings.APP_ENV,
        database=database,
        uploads=uploads,
    )
