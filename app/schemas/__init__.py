"""Pydantic request/response schemas."""

from app.schemas.health import HealthResponse
from app.schemas.users import UserProfileResponse, UserRecordResponse

__all__ = [
    "HealthResponse",
    "UserProfileResponse",
    "UserRecordResponse",
]
