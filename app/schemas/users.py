"""Response schemas for the /users endpoints (camelCase on the wire)."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserProfileResponse(BaseModel):
    """Profile returned after registration or login, with a fresh token."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    email: str
    access_level: int
    profile_photo: str | None = Field(
        default=None,
        description="Base64 contents of the profile photo, or null when the user has none.",
    )
    token: str = Field(..., description="Signed JWT with email and accessLevel claims")


class UserRecordResponse(BaseModel):
    """Full stored user record, password hash included (development reset only)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    email: str
    password: str
    access_level: int
    profile_photo_filename: str | None = None
