"""Unit tests for app.core.config.Settings validation."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from app.core.config import Settings


class TestSettingsDefaults(unittest.TestCase):

    def test_defaults_are_valid(self) -> None:
        s = Settings(_env_file=None)
        self.assertEqual(s.JWT_ALGORITHM, "HS256")
        self.assertLess(s.ACCESS_LEVEL_NORMAL_USER, s.ACCESS_LEVEL_ADMIN)

    def test_log_level_is_normalized(self) -> None:
        s = Settings(_env_file=None, LOG_LEVEL=" debug ")
        self.assertEqual(s.LOG_LEVEL, "DEBUG")

    def test_api_prefix_trailing_slash_stripped(self) -> None:
        s = Settings(_env_file=None, API_V1_PREFIX="/api/v1/")
        self.assertEqual(s.API_V1_PREFIX, "/api/v1")

    def test_default_database_url_names_psycopg2(self) -> None:
        with patch.dict(os.environ):
            os.environ.pop("DATABASE_URL", None)
            s = Settings(_env_file=None)
        self.assertTrue(s.DATABASE_URL.startswith("postgresql+psycopg2://"))

    def test_bare_postgres_urls_pinned_to_psycopg2(self) -> None:
        for url in (
            "postgresql://u:p@db:5432/users",
            "postgres://u:p@db:5432/users",
            "postgres+psycopg2://u:p@db:5432/users",
            " postgresql+psycopg2://u:p@db:5432/users ",
        ):
            s = Settings(_env_file=None, DATABASE_URL=url)
            self.assertEqual(s.DATABASE_URL, "postgresql+psycopg2://u:p@db:5432/users")

    def test_sqlite_url_accepted(self) -> None:
        s = Settings(_env_file=None, DATABASE_URL="sqlite:///./users.db")
        self.assertEqual(s.DATABASE_URL, "sqlite:///./users.db")


class TestSettingsRejects(unittest.TestCase):

    def test_unsupported_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="mysql://root@localhost/users")

    def test_unknown_log_level(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="chatty")

    def test_api_prefix_without_slash(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, API_V1_PREFIX="api")

    def test_salt_rounds_out_of_bcrypt_range(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, PASSWORD_HASH_SALT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, PASSWORD_HASH_SALT_ROUNDS=32)

    def test_blank_upload_folder(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, UPLOADED_FILES_FOLDER="   ")

    def test_admin_level_must_exceed_normal(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, ACCESS_LEVEL_NORMAL_USER=3, ACCESS_LEVEL_ADMIN=3)

    def test_expiry_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_EXPIRE_MINUTES=0)


if __name__ == "__main__":
    unittest.main()
