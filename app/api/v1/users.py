"""Registration, login and logout endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.security import SigningKey, get_signing_key
from app.schemas.users import UserProfileResponse
from app.services.errors import UserServiceError
from app.services.uploads import UploadStore
from app.services.users import login_user, register_user

router = APIRouter()


def get_upload_store(
    settings: Annotated[Settings, Depends(get_settings)],
) -> UploadStore:
    """Dependency: upload store rooted at UPLOADED_FILES_FOLDER."""
    return UploadStore(settings.UPLOADED_FILES_FOLDER)


def to_http_exception(e: UserServiceError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/register/{name}/{email}/{password}", response_model=UserProfileResponse)
def register(
    name: str,
    email: str,
    password: str,
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[UploadStore, Depends(get_upload_store)],
    key: Annotated[SigningKey, Depends(get_signing_key)],
    settings: Annotated[Settings, Depends(get_settings)],
    profile_photo: Annotated[UploadFile | str | None, File(alias="profilePhoto")] = None,
) -> UserProfileResponse:
    """
    Create an account with a profile photo and return the profile plus a token.

    Send the photo as multipart field `profilePhoto` (PNG or JPEG). Returns 400
    if no file is attached or it is not an image, 401 if the email is already
    registered.
    """
    try:
        return register_user(
            db,
            store,
            key,
            settings,
            name=name,
            email=email,
            password=password,
            upload=profile_photo,
        )
    except UserServiceError as e:
        raise to_http_exception(e) from e


@router.post("/login/{email}/{password}", response_model=UserProfileResponse)
def login(
    email: str,
    password: str,
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[UploadStore, Depends(get_upload_store)],
    key: Annotated[SigningKey, Depends(get_signing_key)],
) -> UserProfileResponse:
    """
    Check email and password; return the profile (photo as base64 or null) and a token.
    Unknown email and wrong password both return the same 401.
    """
    try:
        return login_user(db, store, key, email=email, password=password)
    except UserServiceError as e:
        raise to_http_exception(e) from e


@router.post("/logout")
def logout() -> dict:
    """Stateless: tokens are not tracked server-side, so there is nothing to revoke."""
    return {}
