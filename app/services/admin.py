"""Development reset: empty the users table and seed a known administrator."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import User
from app.services.errors import ConflictError, InternalError
from app.services.users import create_user_record

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

SEED_ADMIN_NAME = "Administrator"
SEED_ADMIN_EMAIL = "admin@admin.com"
SEED_ADMIN_PASSWORD = '123!"£qweQWE'


def delete_all_users(db: Session) -> int:
    """Delete every user row and return the count."""
    try:
        deleted = db.query(User).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to empty users table")
        raise InternalError("Failed to empty users collection", cause=e) from e
    if deleted is None:
        raise ConflictError("Failed to empty users collection")
    return deleted


def create_seed_admin(db: Session, settings: "Settings") -> User:
    admin = create_user_record(
        db,
        name=SEED_ADMIN_NAME,
        email=SEED_ADMIN_EMAIL,
        password=SEED_ADMIN_PASSWORD,
        access_level=settings.ACCESS_LEVEL_ADMIN,
        rounds=settings.PASSWORD_HASH_SALT_ROUNDS,
    )
    if admin is None or admin.id is None:
        raise ConflictError("Failed to create Admin user for testing purposes")
    return admin


def reset_user_collection(db: Session, settings: "Settings") -> User:
    """
    Remove all users and create the seed admin. Clearing the upload directory
    is left to the caller, which schedules it after the response.
    """
    deleted = delete_all_users(db)
    admin = create_seed_admin(db, settings)
    logger.info("Users reset: users_deleted=%s admin_id=%s", deleted, admin.id)
    return admin
