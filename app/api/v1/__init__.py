"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import admin, health, users
from app.core.config import Settings, settings


def build_router(settings: Settings) -> APIRouter:
    """v1 routes; the users reset route exists only when APP_ENV=dev."""
    router = APIRouter()
    router.include_router(health.router, prefix="/health", tags=["health"])
    router.include_router(users.router, prefix="/users", tags=["users"])
    if settings.APP_ENV == "dev":
        router.include_router(admin.router, prefix="/users", tags=["admin"])
    return router


router = build_router(settings)
