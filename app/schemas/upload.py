"""Response schema for the image upload endpoint."""

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Public URL of the stored image."""

    url: str = Field(..., description="Path under which the uploaded file is served.")
