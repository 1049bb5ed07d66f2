"""Tests for the create_user CLI against an in-memory database."""

import unittest
from unittest.mock import MagicMock, patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import verify_password
from app.models import Base, User
from app.scripts import create_user


class TestCreateUserScript(unittest.TestCase):

    def setUp(self) -> None:
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(bind=engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        settings = MagicMock()
        settings.PASSWORD_HASH_SALT_ROUNDS = 4
        settings.ACCESS_LEVEL_NORMAL_USER = 1
        settings.ACCESS_LEVEL_ADMIN = 2
        patchers = [
            patch.object(create_user, "SessionLocal", self.SessionLocal),
            patch.object(create_user, "get_settings", return_value=settings),
        ]
        for p in patchers:
            p.start()
            self.addCleanup(p.stop)

    def _users(self) -> list[User]:
        db = self.SessionLocal()
        try:
            return db.query(User).order_by(User.id).all()
        finally:
            db.close()

    def test_creates_normal_user(self) -> None:
        code = create_user.main(["Jane Doe", "jane@example.com", "pw-123"])
        self.assertEqual(code, 0)
        users = self._users()
        self.assertEqual(len(users), 1)
        self.assertEqual(users[0].access_level, 1)
        self.assertIsNone(users[0].profile_photo_filename)
        self.assertTrue(verify_password("pw-123", users[0].password))

    def test_admin_flag(self) -> None:
        self.assertEqual(create_user.main(["Root", "root@example.com", "pw", "--admin"]), 0)
        self.assertEqual(self._users()[0].access_level, 2)

    def test_existing_email_is_refused(self) -> None:
        self.assertEqual(create_user.main(["A", "dup@example.com", "pw"]), 0)
        self.assertEqual(create_user.main(["B", "dup@example.com", "pw"]), 1)
        self.assertEqual(len(self._users()), 1)

    def test_blank_values_are_refused(self) -> None:
        self.assertEqual(create_user.main(["  ", "x@example.com", "pw"]), 1)
        self.assertEqual(self._users(), [])


if __name__ == "__main__":
    unittest.main()
