"""Upload endpoint: admin-only game image upload, stored on local disk."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from app.api.v1.auth import require_admin
from app.api.v1.errors import to_http_exception
from app.core.config import settings
from app.schemas.auth import CurrentUser
from app.schemas.upload import UploadResponse
from app.services.errors import ServiceError
from app.services.uploads import save_upload

router = APIRouter()


@router.post("", response_model=UploadResponse)
async def upload_image(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    file: Annotated[UploadFile | None, File()] = None,
) -> UploadResponse:
    """
    Accept a multipart/form-data request with a field named `file`.

    The file is saved under UPLOAD_DIR with a unique name and the returned URL
    (under UPLOAD_URL_PREFIX) can be stored as a game's ImageUrl.
    """
    if file is None or not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded",
        )
    content = await file.read()
    try:
        url = save_upload(
            file.filename,
            content,
            upload_dir=settings.UPLOAD_DIR,
            url_prefix=settings.UPLOAD_URL_PREFIX,
            max_bytes=settings.MAX_UPLOAD_FILE_BYTES,
        )
    except ServiceError as e:
        raise to_http_exception(e) from e
    return UploadResponse(url=url)
