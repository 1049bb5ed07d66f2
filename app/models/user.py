"""ORM model for registered user accounts."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class User(Base):
    """
    User account with a bcrypt password hash and an access level claim.

    email is indexed but not unique: uniqueness is checked by the registration
    pipeline before insert, so concurrent registrations can both land.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    access_level = Column(Integer, nullable=False)
    profile_photo_filename = Column(String(255), nullable=True)
