"""Development-only reset of the users table. Never mounted when APP_ENV=prod."""

from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session

from app.api.v1.users import get_upload_store, to_http_exception
from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.schemas.users import UserRecordResponse
from app.services.admin import reset_user_collection
from app.services.errors import UserServiceError
from app.services.uploads import UploadStore, clear_upload_storage

router = APIRouter()


@router.post("/reset_user_collection", response_model=UserRecordResponse)
def post_reset_user_collection(
    background_tasks: BackgroundTasks,
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[UploadStore, Depends(get_upload_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserRecordResponse:
    """
    Delete every user, create the seed admin (admin@admin.com) and return its
    full record. The upload directory is emptied after the response is sent.
    """
    try:
        admin = reset_user_collection(db, settings)
    except UserServiceError as e:
        raise to_http_exception(e) from e
    background_tasks.add_task(clear_upload_storage, store)
    return UserRecordResponse(
        id=admin.id,
        name=admin.name,
        email=admin.email,
        password=admin.password,
        access_level=admin.access_level,
        profile_photo_filename=admin.profile_photo_filename,
    )
