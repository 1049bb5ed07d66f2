"""
Create a user account without going through the HTTP API. Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [--admin]
Example:
  python -m app.scripts.create_user "Jane Doe" jane@example.com s3cret --admin
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.services.errors import UserServiceError
from app.services.users import create_user_record, require_unused_email

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a user account (no profile photo).")
    parser.add_argument("name", help="Display name")
    parser.add_argument("email", help="Login email; must not already be registered")
    parser.add_argument("password", help="Plain-text password; stored as a bcrypt hash")
    parser.add_argument(
        "--admin",
        action="store_true",
        help="Give the account ACCESS_LEVEL_ADMIN instead of ACCESS_LEVEL_NORMAL_USER",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    name = args.name.strip()
    email = args.email.strip()
    if not name or not email or not args.password:
        print("Name, email and password must be non-empty.", file=sys.stderr)
        return 1

    settings = get_settings()
    access_level = (
        settings.ACCESS_LEVEL_ADMIN if args.admin else settings.ACCESS_LEVEL_NORMAL_USER
    )
    db = SessionLocal()
    try:
        require_unused_email(db, email)
        user = create_user_record(
            db,
            name=name,
            email=email,
            password=args.password,
            access_level=access_level,
            rounds=settings.PASSWORD_HASH_SALT_ROUNDS,
        )
    except UserServiceError as e:
        print(f"Could not create '{email}': {e.message}", file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created user '%s' with access level %s (id=%s)", email, access_level, user.id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
