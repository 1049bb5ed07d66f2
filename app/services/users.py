"""
Registration and login pipelines.

Each stage is a plain function that either returns the value the next stage
needs or raises a UserServiceError subclass, which ends the pipeline.
"""

import logging
from typing import TYPE_CHECKING, BinaryIO, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.security import SigningKey, create_access_token, hash_password, verify_password
from app.models import User
from app.schemas.users import UserProfileResponse
from app.services.errors import AuthError, InternalError, ValidationError
from app.services.uploads import ALLOWED_IMAGE_CONTENT_TYPES, StoredUpload, UploadStore

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

NO_FILE_MESSAGE = "No file was selected to be uploaded"
INVALID_FILE_TYPE_MESSAGE = "Invalid file type, only JPEG, JPG, and PNG are allowed!"
ACCOUNT_EXISTS_MESSAGE = "Account already exists"
BAD_CREDENTIALS_MESSAGE = "The login or password is incorrect. Or the account was not registered"


class IncomingFile(Protocol):
    """The parts of a multipart upload the pipeline reads (matches fastapi.UploadFile)."""

    filename: str | None
    content_type: str | None
    file: BinaryIO


# Registration stages


def accept_upload(
    store: UploadStore, upload: IncomingFile | str | None
) -> StoredUpload | None:
    """Write the attached file (if any) to the upload directory before any validation."""
    # A plain text part under the field name is not a file. Browsers send an
    # empty, nameless part when no file was picked.
    if upload is None or isinstance(upload, str) or not upload.filename:
        return None
    try:
        return store.save(upload.file, upload.content_type)
    except OSError as e:
        logger.exception("Failed to store uploaded file")
        raise InternalError("Failed to store uploaded file", cause=e) from e


def require_file(stored: StoredUpload | None) -> StoredUpload:
    if stored is None:
        raise ValidationError(NO_FILE_MESSAGE)
    return stored


def require_image(stored: StoredUpload, store: UploadStore) -> StoredUpload:
    """Reject non-image uploads, deleting the stored file first."""
    if stored.content_type in ALLOWED_IMAGE_CONTENT_TYPES:
        return stored
    try:
        store.delete(stored.filename)
    except OSError as e:
        logger.exception("Failed to delete rejected upload %s", stored.filename)
        raise InternalError("Failed to delete rejected upload", cause=e) from e
    logger.info(
        "Rejected upload %s with content type %s", stored.filename, stored.content_type
    )
    raise ValidationError(INVALID_FILE_TYPE_MESSAGE)


def find_user_by_email(db: Session, email: str) -> User | None:
    try:
        return db.query(User).filter(User.email == email).first()
    except SQLAlchemyError as e:
        logger.exception("User lookup failed for email=%s", email)
        raise InternalError("Failed to look up user account", cause=e) from e


def require_unused_email(db: Session, email: str) -> None:
    """
    Pre-check only; nothing stops a concurrent request from inserting the same
    email between this check and create_user_record.
    """
    if find_user_by_email(db, email) is not None:
        raise AuthError(ACCOUNT_EXISTS_MESSAGE)


def create_user_record(
    db: Session,
    *,
    name: str,
    email: str,
    password: str,
    access_level: int,
    rounds: int,
    profile_photo_filename: str | None = None,
) -> User:
    """Hash the password and insert the user. Commits and returns the refreshed row."""
    try:
        password_hash = hash_password(password, rounds)
    except (ValueError, TypeError) as e:
        logger.exception("Password hashing failed for email=%s", email)
        raise InternalError("Failed to hash password", cause=e) from e

    user = User(
        name=name,
        email=email,
        password=password_hash,
        access_level=access_level,
        profile_photo_filename=profile_photo_filename,
    )
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to insert user email=%s", email)
        raise InternalError("Failed to create user account", cause=e) from e
    return user


# Shared response stage


def issue_token(user: User, key: SigningKey) -> str:
    return create_access_token(user.email, user.access_level, key)


def build_profile(user: User, key: SigningKey, store: UploadStore) -> UserProfileResponse:
    """Token plus profile; the photo is read back as base64, null when absent or empty."""
    token = issue_token(user, key)
    photo: str | None = None
    if user.profile_photo_filename:
        try:
            photo = store.read_base64(user.profile_photo_filename) or None
        except (OSError, ValueError) as e:
            logger.exception(
                "Failed to read profile photo %s for email=%s",
                user.profile_photo_filename,
                user.email,
            )
            raise InternalError("Failed to read profile photo", cause=e) from e
    return UserProfileResponse(
        name=user.name,
        email=user.email,
        access_level=user.access_level,
        profile_photo=photo,
        token=token,
    )


# Pipelines


def register_user(
    db: Session,
    store: UploadStore,
    key: SigningKey,
    settings: "Settings",
    *,
    name: str,
    email: str,
    password: str,
    upload: IncomingFile | str | None,
) -> UserProfileResponse:
    """accept-upload, file presence, file type, email uniqueness, create, token, profile."""
    stored = accept_upload(store, upload)
    stored = require_file(stored)
    stored = require_image(stored, store)
    require_unused_email(db, email)
    user = create_user_record(
        db,
        name=name,
        email=email,
        password=password,
        access_level=settings.ACCESS_LEVEL_NORMAL_USER,
        rounds=settings.PASSWORD_HASH_SALT_ROUNDS,
        profile_photo_filename=stored.filename,
    )
    logger.info("Registered user email=%s id=%s", user.email, user.id)
    return build_profile(user, key, store)


def authenticate(db: Session, email: str, password: str) -> User:
    """Same AuthError whether the email is unknown or the password is wrong."""
    user = find_user_by_email(db, email)
    if user is None or not verify_password(password, user.password):
        logger.warning("Failed login for email=%s", email)
        raise AuthError(BAD_CREDENTIALS_MESSAGE)
    return user


def login_user(
    db: Session,
    store: UploadStore,
    key: SigningKey,
    *,
    email: str,
    password: str,
) -> UserProfileResponse:
    user = authenticate(db, email, password)
    logger.info("User logged in email=%s", user.email)
    return build_profile(user, key, store)
