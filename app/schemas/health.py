"""Health check response: database reachability and whether image uploads can be stored."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"] = Field(
        description="ok only when the database is reachable and uploads are writable",
    )
    environment: str
    database: Literal["connected", "disconnected"]
    uploads: Literal["writable", "unavailable"]
