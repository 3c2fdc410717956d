"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, health, inventory, platforms, upload, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])
router.include_router(platforms.router, prefix="/platforms", tags=["platforms"])
router.include_router(users.router, prefix="/user", tags=["user"])
router.include_router(upload.router, prefix="/upload", tags=["upload"])
