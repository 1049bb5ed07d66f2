"""Password hashing, signing-key loading and JWT creation/verification."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt
from fastapi import Request
from pydantic import SecretStr

if TYPE_CHECKING:
    from app.core.config import Settings


@dataclass(frozen=True)
class SigningKey:
    """Token signing material; loaded once at startup and passed explicitly."""

    secret: SecretStr
    algorithm: str
    expire_minutes: int


def load_signing_key(settings: "Settings") -> SigningKey:
    """
    Read the key file named by JWT_PRIVATE_KEY_FILENAME.
    Raises OSError if it cannot be read and ValueError if it is empty.
    """
    path = Path(settings.JWT_PRIVATE_KEY_FILENAME)
    secret = path.read_text(encoding="utf-8")
    if not secret.strip():
        raise ValueError(f"JWT signing key file {path} is empty")
    return SigningKey(
        secret=SecretStr(secret),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )


def get_signing_key(request: Request) -> SigningKey:
    """Dependency: the signing key stored on app state during startup."""
    return request.app.state.signing_key


def hash_password(plain_password: str, rounds: int) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; anything past it does not affect the hash.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(email: str, access_level: int, key: SigningKey) -> str:
    """Create a JWT carrying email and accessLevel claims plus iat/exp."""
    now = datetime.now(UTC)
    payload: dict[str, Any] = {
        "email": email,
        "accessLevel": access_level,
        "exp": now + timedelta(minutes=key.expire_minutes),
        "iat": now,
    }
    return jwt.encode(
        payload,
        key.secret.get_secret_value(),
        algorithm=key.algorithm,
    )


def decode_access_token(token: str, key: SigningKey) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (email, accessLevel, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        key.secret.get_secret_value(),
        algorithms=[key.algorithm],
    )
